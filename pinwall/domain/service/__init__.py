"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .base import Service
from .image_service import ImageService
from .session_service import SessionService
from .user_service import UserService

__all__ = [
    "AuthService",
    "ImageService",
    "OAuthClient",
    "Service",
    "SessionService",
    "UserService",
]
