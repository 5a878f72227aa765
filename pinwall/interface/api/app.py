"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
import logfire
from starlette.exceptions import HTTPException as StarletteHTTPException

from pinwall.config import Settings
from pinwall.domain.error import StoreError
from pinwall.interface.api.routes import auth, health, images
from pinwall.interface.error import LoginRequired
from pinwall.util.di.container import create_container, setup_di
from pinwall.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def _validation_message(exc: RequestValidationError) -> str:
    """First validation problem as a sentence, e.g. ``Invalid image_id: ...``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(
        str(part)
        for part in first.get("loc", ())
        if part not in ("body", "query", "path", "cookie", "header")
    )
    if not field:
        return f"Invalid request: {first.get('msg', 'malformed input')}"
    return f"Invalid {field}: {first.get('msg', 'malformed input')}"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _validation_message(exc)
    logfire.info("Rejected malformed request", path=request.url.path, reason=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"message": message}
    )


async def login_required_handler(
    request: Request, exc: LoginRequired
) -> RedirectResponse:
    return RedirectResponse(url=exc.login_url, status_code=status.HTTP_302_FOUND)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logfire.error("Store failure", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use. Tests pass one built with mocks; the
            production container is created when omitted.
    """
    settings = Settings()

    # Instrument httpx for outbound HTTP requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Pinwall API",
        description="Backend API for Pinwall - a shared wall of pinned images",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container(settings))

    # All errors leave the API as {"message": ...}
    app_instance.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app_instance.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )
    app_instance.add_exception_handler(LoginRequired, login_required_handler)
    app_instance.add_exception_handler(StoreError, store_error_handler)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(images.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
