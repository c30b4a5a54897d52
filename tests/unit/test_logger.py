"""Tests for logging helpers."""

import pytest
from loguru import logger

from src.monitoring.logger import get_logger, log_action, setup_logging


@pytest.fixture
def captured():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


def test_setup_logging_replaces_handlers():
    """Test setup_logging runs and leaves logger usable."""
    setup_logging()
    get_logger(__name__).info("after setup")


def test_log_action_success(captured):
    """Test successful actions log at DEBUG with context."""
    log_action("wait_and_click", "#submit", success=True, duration=0.25)

    record = captured[-1].record
    assert record["level"].name == "DEBUG"
    assert "status=SUCCESS" in record["message"]
    assert record["extra"]["locator"] == "#submit"


def test_log_action_failure(captured):
    """Test failures log at WARNING."""
    log_action("navigate", success=False, error="TimeoutException")

    record = captured[-1].record
    assert record["level"].name == "WARNING"
    assert record["extra"]["error"] == "TimeoutException"
    assert "locator=" not in record["message"]


def test_braces_in_locator(captured):
    """Test locators with braces are logged verbatim."""
    log_action("get_text", "text={total}")
    assert "text={total}" in captured[-1].record["message"]
