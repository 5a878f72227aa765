"""List own images use case."""

from pydantic import BaseModel

from pinwall.application.usecase.base import BaseUseCase
from pinwall.application.usecase.image.common import ImageInfo
from pinwall.domain.service import ImageService
from pinwall.domain.value import UserId


class ListMyImagesRequest(BaseModel):
    """List own images request."""

    owner_id: UserId


class ListMyImagesUseCase(BaseUseCase):
    """Use case for the dashboard wall of the current user."""

    def __init__(self, image_service: ImageService) -> None:
        self.image_service = image_service

    async def execute(self, request: ListMyImagesRequest) -> list[ImageInfo]:
        """Return the caller's images, newest first."""
        images = await self.image_service.list_for_owner(request.owner_id)
        return [ImageInfo.from_image(image) for image in images]
