"""In-memory user repository."""

from datetime import datetime, timezone
from typing import Iterable, Optional
from uuid import uuid4

from pinwall.domain.error import UniqueConstraintError
from pinwall.domain.model.user import User
from pinwall.domain.repository.user import UserRepository
from pinwall.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository.

    Methods never await between reading and writing the dict, so each call
    is atomic with respect to other coroutines on the event loop.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by provider account id."""
        for user in self._users.values():
            if user.external_id == external_id:
                return user
        return None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users at once."""
        return {
            user_id: self._users[user_id]
            for user_id in set(user_ids)
            if user_id in self._users
        }

    async def upsert_by_external_id(
        self, external_id: str, username: Username
    ) -> User:
        """Create or return the user for ``external_id``."""
        existing = next(
            (u for u in self._users.values() if u.external_id == external_id), None
        )

        taken = any(
            u.username == username and u.external_id != external_id
            for u in self._users.values()
        )
        if taken:
            raise UniqueConstraintError("User", "username", username.root)

        if existing:
            if existing.username != username:
                existing = existing.model_copy(update={"username": username})
                self._users[existing.id] = existing
            return existing

        user = User(
            id=UserId(uuid4()),
            external_id=external_id,
            username=username,
            created_at=datetime.now(timezone.utc),
        )
        self._users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Store a user as-is (test seeding helper)."""
        self._users[user.id] = user
        return user
