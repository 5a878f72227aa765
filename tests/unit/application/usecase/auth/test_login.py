"""Unit tests for LoginUseCase."""

from dishka import AsyncContainer
import pytest

from pinwall.adapter.error import ProviderError
from pinwall.application.usecase.auth.login import LoginRequest, LoginUseCase
from pinwall.domain.error import UniqueConstraintError
from pinwall.domain.repository import UserRepository
from pinwall.domain.service import SessionService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_creates_user_and_session(self, unit_env: AsyncContainer):
        """First login should create the user and return a usable token."""
        # Arrange
        login_use_case = await unit_env.get(LoginUseCase)
        session_service = await unit_env.get(SessionService)
        user_repo = await unit_env.get(UserRepository)

        # Act (MockGitHubOAuthClient turns code "alice" into user "alice")
        response = await login_use_case.execute(
            LoginRequest(code="alice", state="state-1")
        )

        # Assert
        saved = await user_repo.find_by_external_id("gh-alice")
        assert saved is not None
        assert response.user_id == str(saved.id)
        assert response.username == "alice"
        assert await session_service.resolve_session(response.token) == saved.id

    @pytest.mark.asyncio
    async def test_repeated_login_returns_same_user(self, unit_env: AsyncContainer):
        """Logging in twice with the same account should reuse the user."""
        login_use_case = await unit_env.get(LoginUseCase)

        first = await login_use_case.execute(LoginRequest(code="alice", state="s1"))
        second = await login_use_case.execute(LoginRequest(code="alice", state="s2"))

        assert first.user_id == second.user_id
        assert first.token != second.token

    @pytest.mark.asyncio
    async def test_provider_failure_creates_nothing(self, unit_env: AsyncContainer):
        """A rejected code should propagate and leave the store untouched."""
        login_use_case = await unit_env.get(LoginUseCase)
        user_repo = await unit_env.get(UserRepository)

        with pytest.raises(ProviderError):
            await login_use_case.execute(LoginRequest(code="fail", state="s"))

        assert await user_repo.find_by_external_id("gh-fail") is None

    @pytest.mark.asyncio
    async def test_username_conflict_propagates(self, unit_env: AsyncContainer):
        """A username held by another account should fail the login."""
        login_use_case = await unit_env.get(LoginUseCase)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice", external_id="someone-else"))

        with pytest.raises(UniqueConstraintError):
            await login_use_case.execute(LoginRequest(code="alice", state="s"))
