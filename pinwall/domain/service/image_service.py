"""Image domain service."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import logfire

from pinwall.domain.model import Image
from pinwall.domain.repository import ImageRepository
from pinwall.domain.value import ImageId, ImageUrl, UserId

from .base import Service


class ImageService(Service):
    """Domain service for image operations."""

    def __init__(self, image_repository: ImageRepository) -> None:
        """Initialize image service.

        Args:
            image_repository: Image repository
        """
        self.image_repository = image_repository

    async def create(self, owner_id: UserId, url: ImageUrl, description: str) -> Image:
        """Pin a new image for a user.

        Args:
            owner_id: Owner of the new image
            url: Validated image URL
            description: Optional description ("" when absent)

        Returns:
            The stored image
        """
        image = Image(
            id=ImageId(uuid4()),
            url=url,
            description=description,
            owner_id=owner_id,
            created_at=datetime.now(timezone.utc),
        )
        with logfire.span(
            "image_service.create", image_id=str(image.id), owner_id=str(owner_id)
        ):
            saved = await self.image_repository.save(image)
            logfire.info("Image created", image_id=str(saved.id))
            return saved

    async def list_for_owner(self, owner_id: UserId) -> list[Image]:
        """List a user's images, newest first."""
        with logfire.span("image_service.list_for_owner", owner_id=str(owner_id)):
            images = await self.image_repository.find_by_owner(owner_id)
            logfire.info("Owner images listed", count=len(images))
            return images

    async def list_all(self, owner_id: Optional[UserId] = None) -> list[Image]:
        """List everyone's images (or one owner's), newest first."""
        with logfire.span(
            "image_service.list_all",
            owner_id=str(owner_id) if owner_id else None,
        ):
            images = await self.image_repository.find_all(owner_id=owner_id)
            logfire.info("Images listed", count=len(images))
            return images

    async def delete_owned(self, image_id: ImageId, owner_id: UserId) -> Optional[Image]:
        """Delete an image if the user owns it.

        Args:
            image_id: Image to delete
            owner_id: User requesting the deletion

        Returns:
            The deleted image, or None when it does not exist or is not owned
        """
        with logfire.span(
            "image_service.delete_owned",
            image_id=str(image_id),
            owner_id=str(owner_id),
        ):
            deleted = await self.image_repository.delete_owned(image_id, owner_id)
            if deleted:
                logfire.info("Image deleted", image_id=str(image_id))
            else:
                logfire.warn(
                    "Image not deleted: missing or not owned",
                    image_id=str(image_id),
                    owner_id=str(owner_id),
                )
            return deleted
