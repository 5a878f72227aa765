"""Authentication domain service."""

import logfire

from pinwall.domain.value.types import OAuthProviderInfo

from .base import Service


class OAuthClient:
    """OAuth client interface for the external identity provider."""

    async def initiate_authorization(self, state: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter issued by ``initiate_authorization``

        Returns:
            Provider user information
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service bridging the provider's login into Pinwall."""

    def __init__(self, oauth_client: OAuthClient) -> None:
        """Initialize auth service.

        Args:
            oauth_client: Client for the external identity provider
        """
        self.oauth_client = oauth_client

    async def initiate_login(self, state: str) -> str:
        """Start the provider login.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        with logfire.span("auth_service.initiate_login"):
            return await self.oauth_client.initiate_authorization(state)

    async def complete_login(self, code: str, state: str) -> OAuthProviderInfo:
        """Finish the provider login and return the provider profile.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            User information from the provider

        Raises:
            ProviderError: If the provider rejects the code or state
        """
        with logfire.span("auth_service.complete_login"):
            return await self.oauth_client.complete_authorization(code, state)
