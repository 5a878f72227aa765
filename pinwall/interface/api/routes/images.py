"""Image routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
import logfire
from pydantic import BaseModel

from pinwall.application.usecase.image import (
    CreateImageRequest,
    CreateImageUseCase,
    DeleteImageRequest,
    DeleteImageResponse,
    DeleteImageUseCase,
    ImageInfo,
    ListImagesRequest,
    ListImagesUseCase,
    ListMyImagesRequest,
    ListMyImagesUseCase,
    PublicImageInfo,
)
from pinwall.domain.error import NotFoundError, StoreError, ValidationError
from pinwall.domain.value import ImageId, UserId
from pinwall.interface.api.gate import AuthorizationGate

router = APIRouter(prefix="/api", tags=["images"], route_class=DishkaRoute)


class CreateImageAPIRequest(BaseModel):
    """API request for pinning an image.

    ``url`` is optional here so that a missing URL is reported with the same
    message as a blank one.
    """

    url: str | None = None
    description: str | None = None


def _store_failure(action: str, error: StoreError) -> HTTPException:
    logfire.error(f"Failed to {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )


@router.post(
    "/images", response_model=ImageInfo, status_code=status.HTTP_201_CREATED
)
async def create_image(
    request: CreateImageAPIRequest,
    create_image_use_case: FromDishka[CreateImageUseCase],
    gate: FromDishka[AuthorizationGate],
) -> ImageInfo:
    """Pin a new image owned by the caller.

    Requires authentication.

    Returns:
        The stored image, including its id

    Raises:
        HTTPException: 401 without a session, 400 for a missing or blank URL
    """
    user = await gate.require_api_user()

    try:
        return await create_image_use_case.execute(
            CreateImageRequest(
                owner_id=user.id,
                url=request.url,
                description=request.description,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError as e:
        raise _store_failure("create image", e)


@router.get("/my-images", response_model=list[ImageInfo])
async def list_my_images(
    list_my_images_use_case: FromDishka[ListMyImagesUseCase],
    gate: FromDishka[AuthorizationGate],
) -> list[ImageInfo]:
    """List the caller's images, newest first.

    Requires authentication.
    """
    user = await gate.require_api_user()

    try:
        return await list_my_images_use_case.execute(
            ListMyImagesRequest(owner_id=user.id)
        )
    except StoreError as e:
        raise _store_failure("list images", e)


@router.delete("/images/{image_id}", response_model=DeleteImageResponse)
async def delete_image(
    image_id: UUID,
    delete_image_use_case: FromDishka[DeleteImageUseCase],
    gate: FromDishka[AuthorizationGate],
) -> DeleteImageResponse:
    """Delete one of the caller's images.

    Requires authentication. Someone else's image is reported exactly like a
    missing one.

    Raises:
        HTTPException: 401 without a session, 404 if the caller owns no such image
    """
    user = await gate.require_api_user()

    try:
        return await delete_image_use_case.execute(
            DeleteImageRequest(image_id=ImageId(image_id), owner_id=user.id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Image not found"
        )
    except StoreError as e:
        raise _store_failure("delete image", e)


async def _list_public(
    use_case: ListImagesUseCase, owner_id: UUID | None
) -> list[PublicImageInfo]:
    try:
        return await use_case.execute(
            ListImagesRequest(owner_id=UserId(owner_id) if owner_id else None)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except StoreError as e:
        raise _store_failure("list images", e)


@router.get("/images", response_model=list[PublicImageInfo])
async def list_images(
    list_images_use_case: FromDishka[ListImagesUseCase],
    owner: UUID | None = None,
) -> list[PublicImageInfo]:
    """List every user's images, newest first.

    Public. Each item names its owner by username only.

    Args:
        list_images_use_case: List images use case from DI
        owner: Optional user id to restrict the listing to

    Example:
        GET /api/images?owner=6f1c...

        [{"id": "...", "url": "...", "description": "", "ownerId": "6f1c...",
          "ownerUsername": "octocat", "createdAt": "..."}]
    """
    return await _list_public(list_images_use_case, owner)


@router.get("/users/{owner_id}/images", response_model=list[PublicImageInfo])
async def list_user_images(
    owner_id: UUID,
    list_images_use_case: FromDishka[ListImagesUseCase],
) -> list[PublicImageInfo]:
    """List one user's images. Public."""
    return await _list_public(list_images_use_case, owner_id)
