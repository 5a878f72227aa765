"""Unit tests for the in-memory repositories."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from pinwall.domain.value import ImageId, SessionId, UserId, Username
from pinwall.persistence.repository.inmemory import (
    InMemoryImageRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_image


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_concurrent_first_logins_create_one_user(self):
        """Racing upserts for one external id should converge on a single user."""
        repo = InMemoryUserRepository()

        users = await asyncio.gather(
            *(
                repo.upsert_by_external_id("583231", Username("octocat"))
                for _ in range(10)
            )
        )

        assert len({u.id for u in users}) == 1
        found = await repo.find_by_external_id("583231")
        assert found is not None
        assert found.id == users[0].id

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self):
        repo = InMemoryUserRepository()

        assert await repo.find_by_id(UserId(uuid4())) is None


class TestInMemoryImageRepository:
    """Tests for InMemoryImageRepository."""

    @pytest.mark.asyncio
    async def test_same_timestamp_order_is_stable(self):
        """Images created at the same instant should still list deterministically."""
        repo = InMemoryImageRepository()
        owner_id = UserId(uuid4())
        first = make_image(owner_id)
        twin = first.model_copy(update={"id": ImageId(uuid4())})
        await repo.save(first)
        await repo.save(twin)

        listed = await repo.find_by_owner(owner_id)

        assert [i.id for i in listed] == [i.id for i in await repo.find_by_owner(owner_id)]
        assert len(listed) == 2

    @pytest.mark.asyncio
    async def test_delete_owned_requires_matching_owner(self):
        repo = InMemoryImageRepository()
        owner_id = UserId(uuid4())
        image = await repo.save(make_image(owner_id, age=timedelta(seconds=1)))

        assert await repo.delete_owned(image.id, UserId(uuid4())) is None
        assert (await repo.delete_owned(image.id, owner_id)).id == image.id
        assert await repo.delete_owned(image.id, owner_id) is None


class TestInMemorySessionRepository:
    """Tests for InMemorySessionRepository."""

    @pytest.mark.asyncio
    async def test_revoke_and_check(self):
        repo = InMemorySessionRepository()
        session_id = SessionId(uuid4())

        assert await repo.is_revoked(session_id) is False
        await repo.revoke(session_id, datetime.now(timezone.utc) + timedelta(days=1))
        assert await repo.is_revoked(session_id) is True

    @pytest.mark.asyncio
    async def test_expired_entries_are_pruned_on_write(self):
        """Entries past their expiry should be forgotten at the next revoke."""
        repo = InMemorySessionRepository()
        stale = SessionId(uuid4())
        await repo.revoke(stale, datetime.now(timezone.utc) - timedelta(seconds=1))

        await repo.revoke(
            SessionId(uuid4()), datetime.now(timezone.utc) + timedelta(days=1)
        )

        assert await repo.is_revoked(stale) is False
