"""Tests for logging configuration."""

import logging

from fastapi.testclient import TestClient

from recipe2shop.api.app import create_app
from recipe2shop.app_logging import LOG_FORMAT, configure_logging
from recipe2shop.containers import AppContainer


def test_configure_logging_installs_one_handler() -> None:
    logger = logging.getLogger("recipe2shop")
    logger.handlers.clear()

    configure_logging()
    configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter is not None
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_create_app_applies_configured_level(container: AppContainer) -> None:
    container.settings.log_level = "warning"

    TestClient(create_app(container))

    assert logging.getLogger("recipe2shop").level == logging.WARNING
