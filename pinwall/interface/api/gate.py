"""Authorization gate shared by the API and browser routes."""

from fastapi import HTTPException, Request, status
import logfire
from pydantic import BaseModel

from pinwall.application.usecase.auth import GetCurrentUserUseCase
from pinwall.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    UserInfo,
)
from pinwall.domain.error import AuthenticationError, NotFoundError
from pinwall.domain.model import User
from pinwall.interface.error import LoginRequired


class SessionStatus(BaseModel):
    """Whether the current request carries a usable session."""

    is_authenticated: bool
    user: User | None = None

    @property
    def info(self) -> UserInfo | None:
        return UserInfo.from_user(self.user) if self.user else None


class AuthorizationGate:
    """Resolves the session cookie of one request.

    The gate only answers "who is calling"; each endpoint picks what an
    anonymous caller gets: :meth:`require_api_user` for JSON endpoints,
    :meth:`require_browser_user` for pages.
    """

    def __init__(
        self,
        get_current_user_use_case: GetCurrentUserUseCase,
        request: Request,
        cookie_name: str,
    ) -> None:
        self.get_current_user_use_case = get_current_user_use_case
        self.request = request
        self.cookie_name = cookie_name
        self._status: SessionStatus | None = None

    @property
    def token(self) -> str | None:
        return self.request.cookies.get(self.cookie_name) or None

    async def status(self) -> SessionStatus:
        """Resolve the session once per request.

        Invalid, expired and ended sessions, as well as sessions whose user
        no longer exists, count as anonymous. Store failures propagate.
        """
        if self._status is not None:
            return self._status

        token = self.token
        if not token:
            self._status = SessionStatus(is_authenticated=False)
            return self._status

        try:
            result = await self.get_current_user_use_case.execute(
                GetCurrentUserRequest(token=token)
            )
            self._status = SessionStatus(is_authenticated=True, user=result.user)
        except AuthenticationError:
            self._status = SessionStatus(is_authenticated=False)
        except NotFoundError as e:
            logfire.warn("Session refers to a missing user", error=str(e))
            self._status = SessionStatus(is_authenticated=False)
        return self._status

    async def require_api_user(self) -> User:
        """Return the caller or fail with 401."""
        session = await self.status()
        if not session.is_authenticated or session.user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Authentication required",
            )
        return session.user

    async def require_browser_user(self) -> User:
        """Return the caller or send the browser to the login entry point."""
        session = await self.status()
        if not session.is_authenticated or session.user is None:
            raise LoginRequired()
        return session.user
