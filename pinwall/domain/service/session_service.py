"""Session domain service."""

from uuid import UUID, uuid4

import logfire

from pinwall.config import AuthSettings
from pinwall.domain.error import AuthenticationError
from pinwall.domain.model import User
from pinwall.domain.repository import SessionRepository
from pinwall.domain.value import SessionId, UserId
from pinwall.util.jwt import JWTError, create_token, verify_token

from .base import Service


class SessionService(Service):
    """Serializes a logged-in user into a session token and back.

    The token carries only the user id and a session id; mutable user data
    is never stored in it.
    """

    def __init__(
        self, auth_settings: AuthSettings, session_repository: SessionRepository
    ) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
            session_repository: Store of ended sessions
        """
        self.auth_settings = auth_settings
        self.session_repository = session_repository

    def create_session(self, user: User) -> str:
        """Start a session for a user.

        Args:
            user: Authenticated user

        Returns:
            Signed session token
        """
        session_id = SessionId(uuid4())
        with logfire.span(
            "session_service.create_session",
            user_id=str(user.id),
            session_id=str(session_id),
        ):
            token = create_token(str(user.id), str(session_id), self.auth_settings)
            logfire.info("Session created", user_id=str(user.id))
            return token

    async def resolve_session(self, token: str) -> UserId:
        """Restore the user id from a session token.

        Args:
            token: Session token from the cookie

        Returns:
            ID of the session's user

        Raises:
            AuthenticationError: If the token is invalid, expired or ended
        """
        with logfire.span("session_service.resolve_session"):
            try:
                payload = verify_token(token, self.auth_settings)
                user_id = UserId(UUID(payload.user_id))
                session_id = SessionId(UUID(payload.sid))
            except (JWTError, ValueError) as e:
                logfire.debug("Session token rejected", error=str(e))
                raise AuthenticationError(str(e))

            if await self.session_repository.is_revoked(session_id):
                logfire.debug("Session already ended", session_id=str(session_id))
                raise AuthenticationError("Session has ended")

            return user_id

    async def end_session(self, token: str) -> None:
        """End a session so its token is no longer accepted.

        Tokens that are already invalid or expired have nothing to end.

        Args:
            token: Session token from the cookie

        Raises:
            StoreError: If the session could not be ended
        """
        with logfire.span("session_service.end_session"):
            try:
                payload = verify_token(token, self.auth_settings)
                session_id = SessionId(UUID(payload.sid))
            except (JWTError, ValueError):
                logfire.info("Logout with unusable token, nothing to end")
                return

            await self.session_repository.revoke(session_id, payload.exp)
            logfire.info(
                "Session ended", user_id=payload.user_id, session_id=str(session_id)
            )
