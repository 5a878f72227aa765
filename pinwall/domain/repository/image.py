"""Image repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pinwall.domain.model.image import Image
from pinwall.domain.value import ImageId, UserId


class ImageRepository(ABC):
    """Repository for Image entities (the resource store).

    Listings are ordered by ``created_at`` descending, ties broken by id
    descending. Implementations raise ``StoreError`` on persistence failures.
    """

    @abstractmethod
    async def save(self, image: Image) -> Image:
        """Insert a new image.

        Args:
            image: The image to store

        Returns:
            The stored image
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Image]:
        """Find every image owned by a user, newest first.

        Args:
            owner_id: The owner's user ID

        Returns:
            The owner's images (possibly empty)
        """
        pass

    @abstractmethod
    async def find_all(self, owner_id: Optional[UserId] = None) -> List[Image]:
        """Find all images, newest first.

        Args:
            owner_id: Only return this user's images (None for everyone's)

        Returns:
            Matching images (possibly empty)
        """
        pass

    @abstractmethod
    async def delete_owned(
        self, image_id: ImageId, owner_id: UserId
    ) -> Optional[Image]:
        """Atomically remove an image if and only if ``owner_id`` owns it.

        The ownership check and the removal are a single operation, so two
        concurrent deletes of the same image cannot both succeed.

        Args:
            image_id: The image to delete
            owner_id: The user requesting the deletion

        Returns:
            The removed image, or None if no image matched both id and owner
        """
        pass
