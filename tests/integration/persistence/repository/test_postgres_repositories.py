"""Integration tests for the PostgreSQL repositories.

Need a reachable database at ``DATABASE__URL``; skipped otherwise. Tables are
created from the SQLAlchemy metadata and emptied after every test.
"""

import asyncio
from datetime import timedelta
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from pinwall.config import Settings
from pinwall.domain.error import UniqueConstraintError
from pinwall.domain.value import UserId, Username
from pinwall.persistence.database import create_engine, create_session_factory
from pinwall.persistence.repository import (
    PostgresImageRepository,
    PostgresUserRepository,
)
from pinwall.persistence.tables import images_table, metadata, users_table
from tests.conftest import make_image


@pytest_asyncio.fixture
async def session_factory():
    engine = create_engine(Settings())
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    except (OSError, SQLAlchemyError) as e:
        await engine.dispose()
        pytest.skip(f"PostgreSQL not available: {e}")

    yield create_session_factory(engine)

    async with engine.begin() as conn:
        await conn.execute(delete(images_table))
        await conn.execute(delete(users_table))
    await engine.dispose()


class TestPostgresUserRepository:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_upsert_is_idempotent(self, session_factory):
        async with session_factory() as session:
            repo = PostgresUserRepository(session)

            first = await repo.upsert_by_external_id("583231", Username("octocat"))
            second = await repo.upsert_by_external_id("583231", Username("octocat"))

            assert first.id == second.id

    @pytest.mark.asyncio
    async def test_upsert_updates_username(self, session_factory):
        async with session_factory() as session:
            repo = PostgresUserRepository(session)

            first = await repo.upsert_by_external_id("583231", Username("octocat"))
            renamed = await repo.upsert_by_external_id("583231", Username("octodog"))

            assert renamed.id == first.id
            assert renamed.username.root == "octodog"

    @pytest.mark.asyncio
    async def test_concurrent_first_logins(self, session_factory):
        """Racing first logins on separate sessions should yield one user."""

        async def upsert():
            async with session_factory() as session:
                return await PostgresUserRepository(session).upsert_by_external_id(
                    "583231", Username("octocat")
                )

        users = await asyncio.gather(*(upsert() for _ in range(5)))

        assert len({u.id for u in users}) == 1

    @pytest.mark.asyncio
    async def test_username_conflict(self, session_factory):
        async with session_factory() as session:
            repo = PostgresUserRepository(session)
            await repo.upsert_by_external_id("1", Username("octocat"))

            with pytest.raises(UniqueConstraintError):
                await repo.upsert_by_external_id("2", Username("octocat"))

    @pytest.mark.asyncio
    async def test_find_by_ids(self, session_factory):
        async with session_factory() as session:
            repo = PostgresUserRepository(session)
            alice = await repo.upsert_by_external_id("1", Username("alice"))

            found = await repo.find_by_ids([alice.id, UserId(uuid4())])

            assert list(found) == [alice.id]


class TestPostgresImageRepository:
    """Integration tests for PostgresImageRepository."""

    @pytest.mark.asyncio
    async def test_save_list_delete(self, session_factory):
        async with session_factory() as session:
            users = PostgresUserRepository(session)
            images = PostgresImageRepository(session)
            alice = await users.upsert_by_external_id("1", Username("alice"))
            bob = await users.upsert_by_external_id("2", Username("bob"))

            old = await images.save(make_image(alice.id, age=timedelta(hours=1)))
            new = await images.save(make_image(alice.id))
            await images.save(make_image(bob.id))

            assert [i.id for i in await images.find_by_owner(alice.id)] == [
                new.id,
                old.id,
            ]
            assert len(await images.find_all()) == 3

            assert await images.delete_owned(old.id, bob.id) is None
            deleted = await images.delete_owned(old.id, alice.id)
            assert deleted is not None
            assert [i.id for i in await images.find_by_owner(alice.id)] == [new.id]

    @pytest.mark.asyncio
    async def test_writes_are_visible_to_other_sessions(self, session_factory):
        """A saved image should be committed before the call returns."""
        async with session_factory() as session:
            alice = await PostgresUserRepository(session).upsert_by_external_id(
                "1", Username("alice")
            )
            image = await PostgresImageRepository(session).save(make_image(alice.id))

        async with session_factory() as other:
            listed = await PostgresImageRepository(other).find_all(owner_id=alice.id)

        assert [i.id for i in listed] == [image.id]
