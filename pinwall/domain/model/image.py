"""Image entity.

An image is a link to a remote picture pinned by exactly one user. Images are
never edited; the owner can only delete them.
"""

from datetime import datetime, timezone

from pydantic import Field

from pinwall.domain.model.common import DomainModel
from pinwall.domain.value import ImageId, ImageUrl, UserId


class Image(DomainModel):
    """Image link owned by a single user."""

    id: ImageId
    url: ImageUrl
    description: str = Field(default="", max_length=1000)
    owner_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
