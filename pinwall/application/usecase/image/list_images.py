"""List public images use case."""

import logfire
from pydantic import BaseModel

from pinwall.application.usecase.base import BaseUseCase
from pinwall.application.usecase.image.common import ImageInfo, PublicImageInfo
from pinwall.domain.error import NotFoundError
from pinwall.domain.service import ImageService, UserService
from pinwall.domain.value import UserId


class ListImagesRequest(BaseModel):
    """List public images request."""

    owner_id: UserId | None = None  # Only this user's images


class ListImagesUseCase(BaseUseCase):
    """Use case for the public wall."""

    def __init__(self, image_service: ImageService, user_service: UserService) -> None:
        """Initialize list images use case.

        Args:
            image_service: Image domain service
            user_service: User domain service
        """
        self.image_service = image_service
        self.user_service = user_service

    async def execute(self, request: ListImagesRequest) -> list[PublicImageInfo]:
        """Execute list images flow.

        Steps:
        1. Fetch images (optionally one owner's), newest first
        2. If filtered and empty, distinguish "no images" from "no such user"
        3. Batch-load owner usernames (one query, no N+1)

        Raises:
            NotFoundError: If the owner filter names a user that does not exist
            StoreError: If the store failed
        """
        with logfire.span(
            "list_images.execute",
            owner_id=str(request.owner_id) if request.owner_id else None,
        ):
            images = await self.image_service.list_all(owner_id=request.owner_id)

            if request.owner_id is not None and not images:
                if not await self.user_service.exists(request.owner_id):
                    raise NotFoundError("User", str(request.owner_id))
                return []

            usernames = await self.user_service.get_usernames(
                image.owner_id for image in images
            )

            return [
                PublicImageInfo(
                    **ImageInfo.from_image(image).model_dump(),
                    owner_username=(
                        usernames[image.owner_id].root
                        if image.owner_id in usernames
                        else None
                    ),
                )
                for image in images
            ]
