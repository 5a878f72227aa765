"""Domain layer DI providers."""

from dishka import Scope, provide

from pinwall.adapter.github.client import GitHubOAuthClient
from pinwall.config import AuthSettings
from pinwall.domain.repository import (
    ImageRepository,
    SessionRepository,
    UserRepository,
)
from pinwall.domain.service import (
    AuthService,
    ImageService,
    SessionService,
    UserService,
)
from pinwall.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, oauth_client: GitHubOAuthClient) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(oauth_client=oauth_client)

    @provide
    def get_session_service(
        self, auth_settings: AuthSettings, session_repository: SessionRepository
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(
            auth_settings=auth_settings, session_repository=session_repository
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_image_service(self, image_repository: ImageRepository) -> ImageService:
        """Provide image domain service."""
        return ImageService(image_repository=image_repository)
