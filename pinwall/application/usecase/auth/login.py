"""Login use case."""

import logfire
from pydantic import BaseModel

from pinwall.application.usecase.base import BaseUseCase
from pinwall.domain.service import AuthService, SessionService, UserService


class LoginRequest(BaseModel):
    """Login request from the OAuth callback."""

    code: str  # OAuth authorization code
    state: str  # State parameter issued when the login began


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    username: str


class LoginUseCase(BaseUseCase):
    """Use case for completing a GitHub login."""

    def __init__(
        self,
        auth_service: AuthService,
        session_service: SessionService,
        user_service: UserService,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            session_service: Session domain service
            user_service: User domain service
        """
        self.auth_service = auth_service
        self.session_service = session_service
        self.user_service = user_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Complete OAuth with the provider and get the profile
        2. Find or create the user by provider account id (one atomic upsert)
        3. Issue the session token

        Args:
            request: Login request with OAuth callback parameters

        Returns:
            Login response with session token and user info

        Raises:
            ProviderError: If the provider login fails
            UniqueConstraintError: If the username belongs to another user
            StoreError: If the user could not be stored
        """
        provider_info = await self.auth_service.complete_login(
            request.code, request.state
        )

        with logfire.span(
            "login_user",
            external_id=provider_info.external_id,
            username=provider_info.username,
        ):
            user = await self.user_service.register_login(provider_info)
            token = self.session_service.create_session(user)

            return LoginResponse(
                token=token,
                user_id=str(user.id),
                username=user.username.root,
            )
