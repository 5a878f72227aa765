"""User domain service."""

from typing import Iterable

import logfire

from pinwall.domain.error import NotFoundError
from pinwall.domain.model import User
from pinwall.domain.repository import UserRepository
from pinwall.domain.value import OAuthProviderInfo, UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        return await self.user_repository.find_by_id(user_id) is not None

    async def get_usernames(self, user_ids: Iterable[UserId]) -> dict[UserId, Username]:
        """Look up the usernames of several users at once.

        Args:
            user_ids: User IDs

        Returns:
            Mapping of found user IDs to usernames
        """
        users = await self.user_repository.find_by_ids(user_ids)
        return {user_id: user.username for user_id, user in users.items()}

    async def register_login(self, provider_info: OAuthProviderInfo) -> User:
        """Find or create the user for a provider login.

        Args:
            provider_info: Profile returned by the identity provider

        Returns:
            The existing or newly created user

        Raises:
            UniqueConstraintError: If the username belongs to another user
            StoreError: On persistence failure
        """
        with logfire.span(
            "user_service.register_login",
            external_id=provider_info.external_id,
            username=provider_info.username,
        ):
            user = await self.user_repository.upsert_by_external_id(
                provider_info.external_id, Username(provider_info.username)
            )
            logfire.info(
                "User logged in",
                user_id=str(user.id),
                external_id=user.external_id,
            )
            return user
