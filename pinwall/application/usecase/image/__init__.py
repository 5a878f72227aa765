"""Image use cases."""

from .common import ImageInfo, PublicImageInfo
from .create_image import CreateImageRequest, CreateImageUseCase
from .delete_image import DeleteImageRequest, DeleteImageResponse, DeleteImageUseCase
from .list_images import ListImagesRequest, ListImagesUseCase
from .list_my_images import ListMyImagesRequest, ListMyImagesUseCase

__all__ = [
    "CreateImageRequest",
    "CreateImageUseCase",
    "DeleteImageRequest",
    "DeleteImageResponse",
    "DeleteImageUseCase",
    "ImageInfo",
    "ListImagesRequest",
    "ListImagesUseCase",
    "ListMyImagesRequest",
    "ListMyImagesUseCase",
    "PublicImageInfo",
]
