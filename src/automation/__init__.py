"""Automation module - Selenium-backed browser actions and locators."""

from .actions import AutomationFacade
from .locators import Locator

__all__ = ["AutomationFacade", "Locator"]
