"""PostgreSQL implementation of User repository."""

from datetime import datetime, timezone
from typing import Iterable, Optional
from uuid import uuid4

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pinwall.domain.error import StoreError, UniqueConstraintError
from pinwall.domain.model import User
from pinwall.domain.repository import UserRepository
from pinwall.domain.value import UserId, Username
from pinwall.persistence.mappers import row_to_user
from pinwall.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        stmt = select(users_table).where(*criteria)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"User lookup failed: {e}") from e
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by provider account id."""
        return await self._find_one(users_table.c.external_id == external_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users with a single IN query."""
        ids = set(user_ids)
        if not ids:
            return {}

        stmt = select(users_table).where(users_table.c.id.in_(ids))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"User batch lookup failed: {e}") from e

        users = [row_to_user(row) for row in result.mappings().all()]
        return {user.id: user for user in users}

    async def upsert_by_external_id(
        self, external_id: str, username: Username
    ) -> User:
        """Insert or update the user keyed by ``external_id``.

        Uses INSERT ... ON CONFLICT so concurrent first logins for the same
        account cannot create two rows.
        """
        stmt = pg_insert(users_table).values(
            id=uuid4(),
            external_id=external_id,
            username=username.root,
            created_at=datetime.now(timezone.utc),
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_users_external_id",
            set_={"username": stmt.excluded.username},
        ).returning(*users_table.c)

        try:
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            # external_id conflicts are absorbed by ON CONFLICT, so this is
            # the username constraint
            logfire.warn(
                "Username already taken",
                external_id=external_id,
                username=username.root,
            )
            raise UniqueConstraintError("User", "username", username.root) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"User upsert failed: {e}") from e

        return row_to_user(row)
