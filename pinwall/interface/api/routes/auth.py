"""Authentication routes."""

import logging
import secrets

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import RedirectResponse
import logfire

from pinwall.adapter.error import ProviderError
from pinwall.application.usecase.auth import LoginUseCase, LogoutUseCase
from pinwall.application.usecase.auth.get_current_user import UserInfo
from pinwall.application.usecase.auth.login import LoginRequest
from pinwall.application.usecase.auth.logout import LogoutRequest
from pinwall.application.usecase.base import ResponseModel
from pinwall.config import Settings
from pinwall.domain.error import StoreError
from pinwall.domain.service import AuthService
from pinwall.interface.api.gate import AuthorizationGate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class ProfileResponse(ResponseModel):
    """Session state of the caller.

    Safe to call without a session: anonymous callers get
    ``isAuthenticated: false`` instead of an error.
    """

    is_authenticated: bool
    user: UserInfo | None = None


def _landing_redirect(settings: Settings) -> RedirectResponse:
    return RedirectResponse(
        url=settings.api.landing_url, status_code=status.HTTP_302_FOUND
    )


@router.get("/auth/external")
async def begin_login(
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Send the browser to GitHub to log in.

    A fresh ``state`` is issued for every attempt and checked again when
    GitHub redirects back to the callback.

    Returns:
        HTTP 302 redirect to the GitHub authorization endpoint
    """
    state = secrets.token_urlsafe(32)
    try:
        authorization_url = await auth_service.initiate_login(state)
    except ProviderError as e:
        logger.error(f"Could not start GitHub login: {e}")
        return _landing_redirect(settings)

    logger.info("Redirecting to GitHub for login")
    return RedirectResponse(url=authorization_url, status_code=status.HTTP_302_FOUND)


@router.get("/auth/external/callback")
async def complete_login(
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Handle the GitHub OAuth callback and complete login.

    On success the session cookie is set on a redirect to the dashboard.
    Every failure is logged and ends on the public landing page instead.

    Args:
        login_use_case: Login use case from DI
        settings: Application settings from DI
        code: Authorization code from GitHub
        state: State parameter issued by ``/auth/external``
        error: Error reported by GitHub (e.g. ``access_denied``)

    Returns:
        HTTP 302 redirect with Set-Cookie header on success

    Example:
        GET /auth/external/callback?code=abc123&state=xyz789

        Redirects to: http://localhost:3000/dashboard
        Sets cookie: session_token
    """
    if error:
        logger.warning(f"GitHub reported a login error: {error}")
        return _landing_redirect(settings)
    if not code or not state:
        logger.warning("OAuth callback without code or state")
        return _landing_redirect(settings)

    try:
        login_response = await login_use_case.execute(
            LoginRequest(code=code, state=state)
        )
    except ProviderError as e:
        logger.error(f"GitHub login failed: {e}")
        return _landing_redirect(settings)
    except StoreError as e:
        # Also covers a username already held by another account
        logger.error(f"Could not store user during login: {e}")
        return _landing_redirect(settings)
    except ValueError as e:
        logger.error(f"GitHub returned an unusable profile: {e}")
        return _landing_redirect(settings)

    logger.info(f"Login successful for user: {login_response.username}")

    redirect_response = RedirectResponse(
        url=settings.api.dashboard_url, status_code=status.HTTP_302_FOUND
    )
    # Cookies must be set on the returned response object itself
    redirect_response.set_cookie(
        key=settings.auth.session_cookie_name,
        value=login_response.token,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
        max_age=settings.auth.session_expiry_days * 24 * 60 * 60,
    )
    return redirect_response


@router.get("/logout")
async def logout(
    logout_use_case: FromDishka[LogoutUseCase],
    gate: FromDishka[AuthorizationGate],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """End the session, clear the cookie and go back to the landing page.

    Without a session this just clears the cookie and redirects.

    Raises:
        HTTPException: 500 if the session could not be ended
    """
    try:
        await logout_use_case.execute(LogoutRequest(token=gate.token))
    except StoreError as e:
        logger.error(f"Could not end session: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log out",
        )

    redirect_response = _landing_redirect(settings)
    redirect_response.delete_cookie(
        key=settings.auth.session_cookie_name,
        path="/",
        secure=settings.secure_cookies,
        httponly=True,
        samesite="lax",
    )
    return redirect_response


@router.get("/profile", response_model=ProfileResponse)
async def profile(gate: FromDishka[AuthorizationGate]) -> ProfileResponse:
    """Report whether the caller is logged in, and as whom.

    Examples:
        Authenticated:
        {
            "isAuthenticated": true,
            "user": {"id": "...", "externalId": "583231", "username": "octocat", ...}
        }

        Anonymous:
        {"isAuthenticated": false, "user": null}

    When the session cannot be checked because the store is down, the caller
    is reported as anonymous.
    """
    try:
        session = await gate.status()
    except StoreError as e:
        logfire.error("Could not resolve session for profile", error=str(e))
        return ProfileResponse(is_authenticated=False)
    return ProfileResponse(is_authenticated=session.is_authenticated, user=session.info)


@router.get("/dashboard")
async def dashboard(
    gate: FromDishka[AuthorizationGate],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Browser entry point for the protected dashboard.

    Logged-in callers continue to the dashboard page, everyone else is sent
    to log in first.
    """
    await gate.require_browser_user()
    return RedirectResponse(
        url=settings.api.dashboard_url, status_code=status.HTTP_302_FOUND
    )
