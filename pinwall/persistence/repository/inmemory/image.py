"""In-memory image repository."""

from typing import Optional

from pinwall.domain.model.image import Image
from pinwall.domain.repository.image import ImageRepository
from pinwall.domain.value import ImageId, UserId


def _newest_first(images: list[Image]) -> list[Image]:
    return sorted(images, key=lambda i: (i.created_at, i.id), reverse=True)


class InMemoryImageRepository(ImageRepository):
    """In-memory implementation of ImageRepository."""

    def __init__(self) -> None:
        self._images: dict[ImageId, Image] = {}

    async def save(self, image: Image) -> Image:
        """Store an image."""
        self._images[image.id] = image
        return image

    async def find_by_owner(self, owner_id: UserId) -> list[Image]:
        """Find an owner's images, newest first."""
        return await self.find_all(owner_id=owner_id)

    async def find_all(self, owner_id: Optional[UserId] = None) -> list[Image]:
        """Find images, newest first, optionally for a single owner."""
        images = list(self._images.values())
        if owner_id is not None:
            images = [i for i in images if i.owner_id == owner_id]
        return _newest_first(images)

    async def delete_owned(
        self, image_id: ImageId, owner_id: UserId
    ) -> Optional[Image]:
        """Remove the image if ``owner_id`` owns it (no await in between)."""
        image = self._images.get(image_id)
        if image is None or image.owner_id != owner_id:
            return None
        return self._images.pop(image_id)
