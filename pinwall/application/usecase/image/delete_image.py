"""Delete image use case."""

from pydantic import BaseModel

from pinwall.application.usecase.base import BaseUseCase, ResponseModel
from pinwall.domain.error import NotFoundError
from pinwall.domain.service import ImageService
from pinwall.domain.value import ImageId, UserId


class DeleteImageRequest(BaseModel):
    """Delete image request."""

    image_id: ImageId
    owner_id: UserId  # Current user


class DeleteImageResponse(ResponseModel):
    """Delete image response."""

    message: str
    id: str


class DeleteImageUseCase(BaseUseCase):
    """Use case for deleting one of the caller's images."""

    def __init__(self, image_service: ImageService) -> None:
        """Initialize delete image use case.

        Args:
            image_service: Image domain service
        """
        self.image_service = image_service

    async def execute(self, request: DeleteImageRequest) -> DeleteImageResponse:
        """Execute delete image flow.

        An image owned by someone else is reported exactly like a missing
        one, so callers cannot discover other users' image ids.

        Raises:
            NotFoundError: If no image with this id is owned by the caller
            StoreError: If the store failed
        """
        deleted = await self.image_service.delete_owned(
            request.image_id, request.owner_id
        )
        if deleted is None:
            raise NotFoundError("Image", str(request.image_id))

        return DeleteImageResponse(
            message="Image deleted successfully", id=str(deleted.id)
        )
