"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock, Mock

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ["APP_ENV"] = "development"
os.environ["DEBUG"] = "true"
os.environ["LOG_TO_FILE"] = "false"
os.environ["WAIT_TIMEOUT"] = "1"
os.environ["POLL_FREQUENCY"] = "0.01"
os.environ["ALERT_GRACE_PERIOD"] = "0"

from selenium.webdriver.remote.webdriver import WebDriver  # noqa: E402
from selenium.webdriver.remote.webelement import WebElement  # noqa: E402


def make_element(text: str | None = "", displayed: bool = True) -> MagicMock:
    """Build a mock WebElement."""
    element = MagicMock(spec=WebElement)
    element.is_displayed.return_value = displayed
    element.get_property.return_value = text
    return element


@pytest.fixture
def element():
    """A visible mock element."""
    return make_element()


@pytest.fixture
def driver(element):
    """Mock WebDriver whose lookups return the ``element`` fixture."""
    mock_driver = Mock(spec=WebDriver)
    mock_driver.find_element.return_value = element
    mock_driver.find_elements.return_value = [element]
    mock_driver.execute_script.return_value = "complete"
    mock_driver.switch_to = Mock()
    return mock_driver


@pytest.fixture
def facade(driver):
    """Facade over the mock driver with short waits."""
    from src.automation.actions import AutomationFacade

    return AutomationFacade(driver, timeout=0.05, alert_grace_period=0, typing_delay=0)


@pytest.fixture
def element_factory():
    """Factory for additional mock elements."""
    return make_element
