"""In-memory session repository.

Ended sessions are kept in process memory until their tokens expire.
"""

from datetime import datetime, timezone

from pinwall.domain.repository.session import SessionRepository
from pinwall.domain.value import SessionId


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository."""

    def __init__(self) -> None:
        self._revoked: dict[SessionId, datetime] = {}

    def _prune(self) -> None:
        now = datetime.now(timezone.utc)
        expired = [sid for sid, exp in self._revoked.items() if exp <= now]
        for sid in expired:
            del self._revoked[sid]

    async def revoke(self, session_id: SessionId, expires_at: datetime) -> None:
        """Remember a session as ended until it expires."""
        self._prune()
        self._revoked[session_id] = expires_at

    async def is_revoked(self, session_id: SessionId) -> bool:
        """Check whether a session has been ended."""
        return session_id in self._revoked
