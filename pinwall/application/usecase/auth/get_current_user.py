"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from pinwall.application.usecase.base import BaseUseCase, ResponseModel
from pinwall.domain.model import User
from pinwall.domain.service import SessionService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # Session token from the cookie


class UserInfo(ResponseModel):
    """Public view of a user."""

    id: str
    external_id: str
    username: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            external_id=user.external_id,
            username=user.username.root,
            created_at=user.created_at,
        )


class GetCurrentUserResponse(BaseModel):
    """The restored user, as domain model and as response view."""

    user: User
    info: UserInfo


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for restoring the logged-in user from a session token."""

    def __init__(
        self, session_service: SessionService, user_service: UserService
    ) -> None:
        """Initialize get current user use case.

        Args:
            session_service: Session domain service
            user_service: User domain service
        """
        self.session_service = session_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Restore the user id from the session token
        2. Load the full user from the store

        Args:
            request: Request with session token

        Returns:
            The session's user

        Raises:
            AuthenticationError: If the token is invalid, expired or ended
            NotFoundError: If the user no longer exists
        """
        user_id = await self.session_service.resolve_session(request.token)
        user = await self.user_service.get_by_id(user_id)
        return GetCurrentUserResponse(user=user, info=UserInfo.from_user(user))
