"""Session repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from pinwall.domain.value import SessionId


class SessionRepository(ABC):
    """Server-side record of ended sessions.

    Session tokens are self-contained; ending one before it expires means
    remembering its id until the expiry passes.
    """

    @abstractmethod
    async def revoke(self, session_id: SessionId, expires_at: datetime) -> None:
        """Mark a session as ended.

        Args:
            session_id: Session to end
            expires_at: When the session's token expires anyway

        Raises:
            StoreError: If the session could not be ended
        """
        pass

    @abstractmethod
    async def is_revoked(self, session_id: SessionId) -> bool:
        """Check whether a session has been ended.

        Args:
            session_id: Session to check

        Returns:
            True if the session was ended
        """
        pass
