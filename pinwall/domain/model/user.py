"""User aggregate root.

Users sign in through GitHub. The GitHub account id is the natural key: one
Pinwall user per GitHub account.
"""

from datetime import datetime, timezone

from pydantic import Field

from pinwall.domain.model.common import DomainModel
from pinwall.domain.value import UserId, Username


class User(DomainModel):
    """A registered user, keyed by the identity provider's account id."""

    id: UserId
    external_id: str = Field(min_length=1, max_length=255)
    username: Username
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
