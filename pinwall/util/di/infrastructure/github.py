"""GitHub infrastructure providers."""

from dishka import Scope, provide

from pinwall.adapter.github.client import (
    GitHubOAuthClient,
    RealGitHubOAuthClient,
)
from pinwall.config import Settings
from pinwall.util.di.base import ProviderBase
from pinwall.util.error import ConfigurationError


class GitHubProvider(ProviderBase):
    """GitHub component base."""

    __mock_component__ = "github"


class ProdGitHubProvider(GitHubProvider):
    """Production GitHub provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_github_oauth_client(self, settings: Settings) -> GitHubOAuthClient:
        """Provide GitHub OAuth client.

        APP-scoped so that a state issued at login initiation is still known
        when the callback arrives.

        Raises:
            ConfigurationError: If GitHub OAuth credentials are not configured
        """
        github = settings.auth.github
        if not github.client_id:
            raise ConfigurationError(
                "auth.github.client_id", "GitHub OAuth client ID must be configured"
            )
        if not github.client_secret:
            raise ConfigurationError(
                "auth.github.client_secret",
                "GitHub OAuth client secret must be configured",
            )

        return RealGitHubOAuthClient(
            client_id=github.client_id,
            client_secret=github.client_secret,
            redirect_uri=settings.auth.github_callback_url,
            scopes=github.scopes,
        )
