"""Authentication use cases."""

from .get_current_user import GetCurrentUserUseCase
from .login import LoginUseCase
from .logout import LogoutUseCase

__all__ = ["GetCurrentUserUseCase", "LoginUseCase", "LogoutUseCase"]
