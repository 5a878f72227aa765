"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from pinwall.config import Settings
from pinwall.util.di import PROVIDERS, Component, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container.

    Every mockable component uses its production implementation, except
    persistence when ``storage.backend`` is ``"memory"``.

    Args:
        settings: Settings used to pick implementations. Loaded from the
            environment when omitted.

    Returns:
        Configured DI container
    """
    settings = settings or Settings()
    in_memory: set[Component] = (
        {"persistence"} if settings.storage.backend == "memory" else set()
    )

    provider_instances = [
        get_provider(
            base, use_mock=getattr(base, "__mock_component__", None) in in_memory
        )()
        for base in PROVIDERS
    ]
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
