"""Stdlib logging setup for the pinwall process.

Logfire handles spans and structured events; this module only decides what
plain ``logging`` records reach stdout.
"""

import logging
import sys

from pinwall.config import Settings

# Loggers that are chatty at INFO and only interesting when something breaks
QUIET_LOGGERS = (
    "httpx",
    "httpcore",
    "sqlalchemy.engine",
    "asyncpg",
    "alembic",
)


def setup_logging(settings: Settings) -> logging.Logger:
    """Route log records to stdout and return the ``pinwall`` logger.

    Debug mode lowers the pinwall logger to DEBUG and lets uvicorn's
    per-request access lines through. Otherwise access lines are dropped to
    WARNING along with the libraries in :data:`QUIET_LOGGERS`.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    app_logger = logging.getLogger("pinwall")
    app_logger.setLevel(level)
    app_logger.info(
        "Logging ready: environment=%s level=%s storage=%s",
        settings.environment,
        logging.getLevelName(level),
        settings.storage.backend,
    )
    return app_logger
