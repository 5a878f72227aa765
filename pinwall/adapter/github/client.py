"""GitHub OAuth client implementation.

Implements the OAuth web application flow:
https://docs.github.com/en/apps/oauth-apps/building-oauth-apps/authorizing-oauth-apps
"""

import time
from urllib.parse import urlencode

import httpx
import logfire

from pinwall.adapter.error import ProviderError
from pinwall.domain.service.auth_service import OAuthClient
from pinwall.domain.value.types import OAuthProviderInfo

PROVIDER = "github"

# Unanswered login attempts are forgotten after this long
STATE_TTL_SECONDS = 600.0
MAX_PENDING_STATES = 1_000


class GitHubOAuthError(ProviderError):
    """GitHub OAuth error."""

    def __init__(self, message: str):
        super().__init__(PROVIDER, message)


class GitHubOAuthClient(OAuthClient):
    """Base class for GitHub OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGitHubOAuthClient(GitHubOAuthClient):
    """GitHub OAuth client talking to github.com."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        scopes: list[str],
        http_client: httpx.AsyncClient | None = None,
        state_ttl_seconds: float = STATE_TTL_SECONDS,
        max_pending_states: int = MAX_PENDING_STATES,
    ) -> None:
        """Initialize GitHub OAuth client.

        Args:
            client_id: OAuth app client ID
            client_secret: OAuth app client secret
            redirect_uri: Callback URL registered with the OAuth app
            scopes: Scopes requested at the authorization endpoint
            http_client: Optional shared httpx client (one per call otherwise)
            state_ttl_seconds: How long an issued state stays valid
            max_pending_states: Upper bound on remembered states; the oldest
                are dropped first
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scopes = scopes
        self._http_client = http_client
        self.state_ttl_seconds = state_ttl_seconds
        self.max_pending_states = max_pending_states

        self.authorize_url = "https://github.com/login/oauth/authorize"
        self.token_url = "https://github.com/login/oauth/access_token"
        self.user_info_url = "https://api.github.com/user"

        # state -> monotonic issue time, oldest first.
        # Process-local: a callback must reach the process that started the login.
        self._pending_states: dict[str, float] = {}

    def _client(self) -> httpx.AsyncClient:
        return self._http_client or httpx.AsyncClient(timeout=30.0)

    def _prune_states(self, now: float) -> None:
        """Forget expired states, then the oldest ones beyond the cap.

        States are inserted in issue order, so expired ones are at the front.
        """
        while self._pending_states:
            oldest, issued_at = next(iter(self._pending_states.items()))
            if now - issued_at < self.state_ttl_seconds:
                break
            del self._pending_states[oldest]

        while len(self._pending_states) >= self.max_pending_states:
            del self._pending_states[next(iter(self._pending_states))]

    async def initiate_authorization(self, state: str) -> str:
        """Build the GitHub authorization URL.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        now = time.monotonic()
        self._pending_states.pop(state, None)
        self._prune_states(now)
        self._pending_states[state] = now

        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": " ".join(self.scopes),
            "state": state,
            "allow_signup": "true",
        }

        logfire.info(
            "GitHub OAuth authorization initiated",
            redirect_uri=self.redirect_uri,
            scopes=self.scopes,
        )

        return f"{self.authorize_url}?{urlencode(params)}"

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Exchange the callback code and fetch the GitHub profile.

        Args:
            code: Authorization code from the callback
            state: State parameter from the callback

        Returns:
            User information from GitHub

        Raises:
            GitHubOAuthError: If the state is unknown or GitHub rejects the exchange
        """
        issued_at = self._pending_states.pop(state, None)
        if issued_at is None:
            raise GitHubOAuthError("Invalid or already used state")
        if time.monotonic() - issued_at >= self.state_ttl_seconds:
            raise GitHubOAuthError("Login attempt expired")

        access_token = await self._exchange_code_for_token(code)
        user_info = await self._get_user_info(access_token)

        github_id = user_info.get("id")
        login = user_info.get("login")
        if github_id is None or not isinstance(login, str) or not login:
            logfire.error(
                "GitHub profile incomplete",
                fields=sorted(user_info),
            )
            raise GitHubOAuthError("User info response lacks id or login")

        logfire.info(
            "GitHub OAuth completed",
            login=login,
            github_id=github_id,
        )

        return OAuthProviderInfo(
            external_id=str(github_id),
            username=login,
            display_name=user_info.get("name"),
            avatar_url=user_info.get("avatar_url"),
        )

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Raises:
            GitHubOAuthError: If token exchange fails
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
            "redirect_uri": self.redirect_uri,
        }

        client = self._client()
        try:
            response = await client.post(
                self.token_url,
                data=data,
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logfire.error("GitHub token exchange HTTP error", error=str(e))
            raise GitHubOAuthError(f"HTTP error during token exchange: {e}")
        finally:
            if self._http_client is None:
                await client.aclose()

        if response.status_code != 200:
            logfire.error(
                "GitHub token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GitHubOAuthError(f"Token exchange failed: {response.status_code}")

        result = response.json()
        # GitHub reports bad codes with 200 and an "error" field
        if "access_token" not in result:
            logfire.error(
                "GitHub token exchange rejected",
                error=result.get("error"),
                description=result.get("error_description"),
            )
            raise GitHubOAuthError(
                f"Token exchange rejected: {result.get('error', 'unknown error')}"
            )

        return result["access_token"]

    async def _get_user_info(self, access_token: str) -> dict:
        """Get the authenticated user's GitHub profile.

        Raises:
            GitHubOAuthError: If the API request fails
        """
        client = self._client()
        try:
            response = await client.get(
                self.user_info_url,
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/vnd.github+json",
                },
            )
        except httpx.HTTPError as e:
            logfire.error("GitHub user info HTTP error", error=str(e))
            raise GitHubOAuthError(f"HTTP error fetching user info: {e}")
        finally:
            if self._http_client is None:
                await client.aclose()

        if response.status_code != 200:
            logfire.error(
                "GitHub user info request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GitHubOAuthError(f"User info request failed: {response.status_code}")

        return response.json()


class MockGitHubOAuthClient(GitHubOAuthClient):
    """Mock GitHub OAuth client for testing.

    The callback ``code`` selects the account: ``code="alice"`` logs in as
    GitHub user ``alice`` with external id ``gh-alice``. ``code="fail"``
    simulates GitHub rejecting the code.
    """

    def __init__(self) -> None:
        pass

    async def initiate_authorization(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://github.com/login/oauth/authorize?state={state}&mock=true"

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Return a deterministic profile derived from ``code``."""
        if code == "fail":
            raise GitHubOAuthError("Token exchange rejected: bad_verification_code")

        return OAuthProviderInfo(
            external_id=f"gh-{code}",
            username=code,
            display_name=f"Mock {code}",
            avatar_url="https://example.com/avatar.png",
        )
