"""Login flow example - the-internet.herokuapp.com.

This example demonstrates:
- Driving an existing WebDriver through AutomationFacade
- Typing, clicking and link navigation
- Native alert capture
- Data helpers for generated test input

Usage:
    python -m examples.login_flow.run
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions

from src.automation.actions import AutomationFacade
from src.core.exceptions import InteractionError
from src.monitoring.logger import get_logger, setup_logging

logger = get_logger(__name__)

BASE_URL = "https://the-internet.herokuapp.com"


def create_driver() -> webdriver.Chrome:
    """Create a headless Chrome that returns once the DOM is parsed."""
    options = ChromeOptions()
    options.add_argument("--headless=new")
    options.add_argument("--window-size=1920,1080")
    options.page_load_strategy = "eager"
    return webdriver.Chrome(options=options)


def run_login(facade: AutomationFacade) -> bool:
    """Log in with the demo account and check the flash message."""
    facade.navigate(f"{BASE_URL}/login")
    facade.enter_value("id=username", "tomsmith")
    facade.enter_value("id=password", "SuperSecretPassword!")
    facade.wait_and_click("button[type=submit]")

    if not facade.is_element_available("#flash.success"):
        logger.error("Login did not succeed")
        return False

    logger.info(f"Flash: {facade.get_text('#flash').strip()}")
    facade.navigate_via_link("a[href='/logout']")
    return True


def run_alerts(facade: AutomationFacade) -> None:
    """Trigger a JS alert and capture its message."""
    facade.navigate(f"{BASE_URL}/javascript_alerts")
    facade.wait_and_click("text=Click for JS Alert")
    message = facade.capture_and_accept_alert(timeout=5)
    logger.info(f"Alert said: {message}")


def main() -> int:
    """Run the example."""
    setup_logging()

    logger.info("=" * 60)
    logger.info(f"Run date: {AutomationFacade.get_current_date()}")
    logger.info(f"Generated order id: {AutomationFacade.generate_random_value(8, 'alphanumeric')}")
    logger.info(f"Budget: {AutomationFacade.convert_to_money_format('2500')}")
    logger.info("=" * 60)

    driver = create_driver()
    try:
        facade = AutomationFacade(driver, timeout=10)
        ok = run_login(facade)
        run_alerts(facade)
    except InteractionError as e:
        logger.error(f"Example failed: {e}")
        return 1
    finally:
        driver.quit()

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
