"""Interface layer DI providers."""

from dishka import Scope, provide
from fastapi import Request

from pinwall.application.usecase.auth import GetCurrentUserUseCase
from pinwall.config import Settings
from pinwall.interface.api.gate import AuthorizationGate
from pinwall.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """Request-scoped helpers used by the API routes."""

    @provide(scope=Scope.REQUEST)
    def get_authorization_gate(
        self,
        get_current_user_use_case: GetCurrentUserUseCase,
        request: Request,
        settings: Settings,
    ) -> AuthorizationGate:
        """Provide the per-request authorization gate."""
        return AuthorizationGate(
            get_current_user_use_case=get_current_user_use_case,
            request=request,
            cookie_name=settings.auth.session_cookie_name,
        )
