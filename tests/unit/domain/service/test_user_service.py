"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from pinwall.domain.error import NotFoundError, UniqueConstraintError
from pinwall.domain.service import UserService
from pinwall.domain.value import OAuthProviderInfo, UserId
from pinwall.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_user


class TestRegisterLogin:
    """Tests for UserService.register_login()."""

    @pytest.mark.asyncio
    async def test_first_login_creates_user(self):
        """A new external account should become a new user."""
        service = UserService(InMemoryUserRepository())

        user = await service.register_login(
            OAuthProviderInfo(external_id="583231", username="octocat")
        )

        assert user.external_id == "583231"
        assert user.username.root == "octocat"

    @pytest.mark.asyncio
    async def test_repeated_login_reuses_user(self):
        """Logging in twice with the same account should never create a second user."""
        repo = InMemoryUserRepository()
        service = UserService(repo)
        info = OAuthProviderInfo(external_id="583231", username="octocat")

        first = await service.register_login(info)
        second = await service.register_login(info)

        assert first.id == second.id
        assert len(await repo.find_by_ids([first.id, second.id])) == 1

    @pytest.mark.asyncio
    async def test_renamed_account_updates_username(self):
        """A GitHub rename should carry over on the next login."""
        service = UserService(InMemoryUserRepository())

        first = await service.register_login(
            OAuthProviderInfo(external_id="583231", username="octocat")
        )
        second = await service.register_login(
            OAuthProviderInfo(external_id="583231", username="octodog")
        )

        assert second.id == first.id
        assert second.username.root == "octodog"

    @pytest.mark.asyncio
    async def test_username_taken_by_other_account(self):
        """A username held by a different account should be refused."""
        repo = InMemoryUserRepository()
        await repo.save(make_user("octocat", external_id="1"))
        service = UserService(repo)

        with pytest.raises(UniqueConstraintError):
            await service.register_login(
                OAuthProviderInfo(external_id="2", username="octocat")
            )


class TestLookups:
    """Tests for UserService lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_user(self):
        """A missing user should raise NotFoundError, never a placeholder."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_usernames_skips_unknown_ids(self):
        """Unknown ids should simply be absent from the result."""
        repo = InMemoryUserRepository()
        alice = await repo.save(make_user("alice"))
        service = UserService(repo)

        names = await service.get_usernames([alice.id, UserId(uuid4())])

        assert names == {alice.id: alice.username}

    @pytest.mark.asyncio
    async def test_exists(self):
        """exists() should reflect the store."""
        repo = InMemoryUserRepository()
        alice = await repo.save(make_user("alice"))
        service = UserService(repo)

        assert await service.exists(alice.id) is True
        assert await service.exists(UserId(uuid4())) is False
