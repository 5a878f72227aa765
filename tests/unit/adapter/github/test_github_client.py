"""Unit tests for RealGitHubOAuthClient against a mocked GitHub."""

import time
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from pinwall.adapter.github.client import (
    MAX_PENDING_STATES,
    GitHubOAuthError,
    RealGitHubOAuthClient,
)


def make_client(handler) -> RealGitHubOAuthClient:
    return RealGitHubOAuthClient(
        client_id="client-123",
        client_secret="secret-456",
        redirect_uri="http://localhost:8000/auth/external/callback",
        scopes=["read:user"],
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def github_ok(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/login/oauth/access_token":
        return httpx.Response(200, json={"access_token": "gho_abc", "scope": "read:user"})
    if request.url.path == "/user":
        assert request.headers["Authorization"] == "Bearer gho_abc"
        return httpx.Response(
            200,
            json={
                "id": 583231,
                "login": "octocat",
                "name": "The Octocat",
                "avatar_url": "https://avatars.githubusercontent.com/u/583231",
            },
        )
    return httpx.Response(404)


class TestInitiateAuthorization:
    """Tests for the authorization redirect."""

    @pytest.mark.asyncio
    async def test_authorization_url(self):
        client = make_client(github_ok)

        url = await client.initiate_authorization("state-xyz")

        parsed = urlparse(url)
        params = parse_qs(parsed.query)
        assert parsed.netloc == "github.com"
        assert parsed.path == "/login/oauth/authorize"
        assert params["client_id"] == ["client-123"]
        assert params["redirect_uri"] == [
            "http://localhost:8000/auth/external/callback"
        ]
        assert params["scope"] == ["read:user"]
        assert params["state"] == ["state-xyz"]


class TestCompleteAuthorization:
    """Tests for the callback exchange."""

    @pytest.mark.asyncio
    async def test_returns_profile(self):
        client = make_client(github_ok)
        await client.initiate_authorization("state-xyz")

        info = await client.complete_authorization("code-1", "state-xyz")

        assert info.external_id == "583231"
        assert info.username == "octocat"
        assert info.display_name == "The Octocat"

    @pytest.mark.asyncio
    async def test_unknown_state_is_rejected(self):
        """A state that was never issued should fail before calling GitHub."""
        calls = []

        def handler(request):
            calls.append(request)
            return github_ok(request)

        client = make_client(handler)

        with pytest.raises(GitHubOAuthError):
            await client.complete_authorization("code-1", "forged")
        assert calls == []

    @pytest.mark.asyncio
    async def test_state_is_single_use(self):
        client = make_client(github_ok)
        await client.initiate_authorization("state-xyz")
        await client.complete_authorization("code-1", "state-xyz")

        with pytest.raises(GitHubOAuthError):
            await client.complete_authorization("code-1", "state-xyz")

    @pytest.mark.asyncio
    async def test_bad_code_reported_with_200(self):
        """GitHub answers bad codes with 200 and an error field."""

        def handler(request):
            return httpx.Response(
                200,
                json={
                    "error": "bad_verification_code",
                    "error_description": "The code passed is incorrect or expired.",
                },
            )

        client = make_client(handler)
        await client.initiate_authorization("s")

        with pytest.raises(GitHubOAuthError, match="bad_verification_code"):
            await client.complete_authorization("stale", "s")

    @pytest.mark.asyncio
    async def test_user_endpoint_failure(self):
        def handler(request):
            if request.url.path == "/user":
                return httpx.Response(401, json={"message": "Bad credentials"})
            return github_ok(request)

        client = make_client(handler)
        await client.initiate_authorization("s")

        with pytest.raises(GitHubOAuthError, match="401"):
            await client.complete_authorization("code-1", "s")

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        await client.initiate_authorization("s")

        with pytest.raises(GitHubOAuthError):
            await client.complete_authorization("code-1", "s")

    @pytest.mark.asyncio
    async def test_profile_without_login_is_rejected(self):
        def handler(request):
            if request.url.path == "/user":
                return httpx.Response(200, json={"id": 583231})
            return github_ok(request)

        client = make_client(handler)
        await client.initiate_authorization("s")

        with pytest.raises(GitHubOAuthError, match="id or login"):
            await client.complete_authorization("code-1", "s")

    @pytest.mark.asyncio
    async def test_empty_profile_is_rejected(self):
        def handler(request):
            if request.url.path == "/user":
                return httpx.Response(200, json={})
            return github_ok(request)

        client = make_client(handler)
        await client.initiate_authorization("s")

        with pytest.raises(GitHubOAuthError):
            await client.complete_authorization("code-1", "s")


class TestPendingStates:
    """Tests for expiry and bounding of issued states."""

    @pytest.mark.asyncio
    async def test_expired_state_is_rejected(self):
        calls = []

        def handler(request):
            calls.append(request)
            return github_ok(request)

        client = make_client(handler)
        await client.initiate_authorization("old")
        client._pending_states["old"] = time.monotonic() - client.state_ttl_seconds - 1

        with pytest.raises(GitHubOAuthError, match="expired"):
            await client.complete_authorization("code-1", "old")
        assert calls == []
        assert "old" not in client._pending_states

    @pytest.mark.asyncio
    async def test_expired_states_pruned_on_initiate(self):
        client = make_client(github_ok)
        await client.initiate_authorization("old")
        await client.initiate_authorization("recent")
        client._pending_states["old"] = time.monotonic() - client.state_ttl_seconds - 1

        await client.initiate_authorization("new")

        assert set(client._pending_states) == {"recent", "new"}
        with pytest.raises(GitHubOAuthError):
            await client.complete_authorization("code-1", "old")

    @pytest.mark.asyncio
    async def test_oldest_state_dropped_at_capacity(self):
        client = RealGitHubOAuthClient(
            client_id="client-123",
            client_secret="secret-456",
            redirect_uri="http://localhost:8000/auth/external/callback",
            scopes=["read:user"],
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(github_ok)),
            max_pending_states=3,
        )
        for state in ["s1", "s2", "s3", "s4"]:
            await client.initiate_authorization(state)

        assert list(client._pending_states) == ["s2", "s3", "s4"]
        with pytest.raises(GitHubOAuthError):
            await client.complete_authorization("code-1", "s1")
        info = await client.complete_authorization("code-1", "s4")
        assert info.username == "octocat"

    @pytest.mark.asyncio
    async def test_abandoned_logins_stay_bounded(self):
        client = make_client(github_ok)

        for i in range(MAX_PENDING_STATES + 500):
            await client.initiate_authorization(f"s{i}")

        assert len(client._pending_states) == MAX_PENDING_STATES
        assert f"s{MAX_PENDING_STATES + 499}" in client._pending_states
        assert "s0" not in client._pending_states
