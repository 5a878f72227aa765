"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from pinwall.domain.model.user import User
from pinwall.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for the User aggregate (the identity store).

    Implementations raise ``StoreError`` on persistence failures and
    ``UniqueConstraintError`` when a unique field is already taken.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by the identity provider's account id.

        Args:
            external_id: Provider account id

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users in one round trip.

        Args:
            user_ids: IDs to look up (duplicates allowed)

        Returns:
            Mapping of found IDs to users; missing IDs are absent
        """
        pass

    @abstractmethod
    async def upsert_by_external_id(
        self, external_id: str, username: Username
    ) -> User:
        """Create the user for ``external_id`` or return the existing one.

        This is one atomic step: two concurrent first logins for the same
        provider account resolve to the same user. An existing user whose
        provider login changed gets the new username.

        Args:
            external_id: Provider account id
            username: Username reported by the provider

        Returns:
            The created or existing user

        Raises:
            UniqueConstraintError: If the username belongs to another user
            StoreError: On any other persistence failure
        """
        pass
