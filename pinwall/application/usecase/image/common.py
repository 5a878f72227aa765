"""Response views shared by the image use cases."""

from datetime import datetime

from pinwall.application.usecase.base import ResponseModel
from pinwall.domain.model import Image


class ImageInfo(ResponseModel):
    """An image as returned to its owner."""

    id: str
    url: str
    description: str
    owner_id: str
    created_at: datetime

    @classmethod
    def from_image(cls, image: Image) -> "ImageInfo":
        return cls(
            id=str(image.id),
            url=image.url.root,
            description=image.description,
            owner_id=str(image.owner_id),
            created_at=image.created_at,
        )


class PublicImageInfo(ImageInfo):
    """An image on the public wall.

    The owner is exposed by username only; no other user field is included.
    """

    owner_username: str | None
