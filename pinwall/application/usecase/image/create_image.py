"""Create image use case."""

import logfire
from pydantic import BaseModel

from pinwall.application.usecase.base import BaseUseCase
from pinwall.application.usecase.image.common import ImageInfo
from pinwall.domain.error import ValidationError
from pinwall.domain.service import ImageService
from pinwall.domain.value import ImageUrl, UserId


class CreateImageRequest(BaseModel):
    """Create image request."""

    owner_id: UserId  # Resolved from the session, never from the body
    url: str | None = None
    description: str | None = None


class CreateImageUseCase(BaseUseCase):
    """Use case for pinning a new image."""

    def __init__(self, image_service: ImageService) -> None:
        """Initialize create image use case.

        Args:
            image_service: Image domain service
        """
        self.image_service = image_service

    async def execute(self, request: CreateImageRequest) -> ImageInfo:
        """Execute create image flow.

        Args:
            request: Create image request

        Returns:
            The stored image, including its generated id

        Raises:
            ValidationError: If the URL is missing or blank
            StoreError: If the image could not be stored
        """
        if request.url is None:
            raise ValidationError("Image URL is required")
        try:
            url = ImageUrl(request.url)
        except ValueError:
            logfire.warn("Rejected image URL", owner_id=str(request.owner_id))
            raise ValidationError("Image URL is required and must not be blank")

        description = (request.description or "").strip()
        if len(description) > 1000:
            raise ValidationError("Description must be at most 1000 characters")

        image = await self.image_service.create(request.owner_id, url, description)
        return ImageInfo.from_image(image)
