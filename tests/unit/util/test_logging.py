"""Unit tests for stdlib logging setup."""

import logging

import pytest

from pinwall.config import Settings
from pinwall.util.logging import QUIET_LOGGERS, setup_logging

TOUCHED = (*QUIET_LOGGERS, "uvicorn.access", "pinwall")


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    levels = {name: logging.getLogger(name).level for name in TOUCHED}
    yield
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    for name, saved in levels.items():
        logging.getLogger(name).setLevel(saved)


class TestSetupLogging:
    """Tests for logger levels after setup."""

    def test_quiets_libraries(self, restore_logging):
        setup_logging(Settings(_env_file=None, debug=False))

        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_app_logger_level(self, restore_logging):
        logger = setup_logging(Settings(_env_file=None, debug=False))

        assert logger.name == "pinwall"
        assert logger.level == logging.INFO

    def test_debug_lets_access_lines_through(self, restore_logging):
        logger = setup_logging(Settings(_env_file=None, debug=True))

        assert logger.level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").level == logging.INFO
        assert logging.getLogger("alembic").level == logging.WARNING
