"""Logout use case."""

from pydantic import BaseModel

from pinwall.application.usecase.base import BaseUseCase
from pinwall.domain.service import SessionService


class LogoutRequest(BaseModel):
    """Logout request."""

    token: str | None = None  # Session token from the cookie, if any


class LogoutUseCase(BaseUseCase):
    """Use case for ending the current session."""

    def __init__(self, session_service: SessionService) -> None:
        """Initialize logout use case.

        Args:
            session_service: Session domain service
        """
        self.session_service = session_service

    async def execute(self, request: LogoutRequest) -> None:
        """End the session, if there is one.

        Raises:
            StoreError: If the session could not be ended
        """
        if request.token:
            await self.session_service.end_session(request.token)
