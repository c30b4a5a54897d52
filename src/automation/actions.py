"""High-level browser actions over a Selenium WebDriver."""

import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from selenium.common.exceptions import (
    NoAlertPresentException,
    NoSuchElementException,
    StaleElementReferenceException,
    WebDriverException,
)
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.select import Select
from selenium.webdriver.support.ui import WebDriverWait

from src.automation.locators import Locator
from src.core.config import settings
from src.core.exceptions import InteractionError
from src.helpers import data
from src.monitoring.logger import get_logger, log_action

logger = get_logger(__name__)

WAIT_CONDITIONS = {
    "presence": EC.presence_of_element_located,
    "visible": EC.visibility_of_element_located,
}


class AutomationFacade:
    """Named browser actions forwarded to one WebDriver.

    The driver is owned by the caller: the facade never starts, quits or
    closes it, and calls against one driver must not interleave.
    """

    def __init__(
        self,
        driver: WebDriver,
        timeout: float | None = None,
        alert_grace_period: float | None = None,
        typing_delay: float | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            driver: Selenium WebDriver instance
            timeout: Explicit wait timeout in seconds
            alert_grace_period: Pause before alert handling in seconds
            typing_delay: Pause between keystrokes in seconds
        """
        self.driver = driver
        self.timeout = timeout if timeout is not None else settings.wait_timeout
        self.alert_grace_period = (
            alert_grace_period if alert_grace_period is not None else settings.alert_grace_period
        )
        self.typing_delay = typing_delay if typing_delay is not None else settings.typing_delay

    # -- internals -----------------------------------------------------------

    @contextmanager
    def _interaction(
        self, action: str, locator: str | None = None, detail: str = ""
    ) -> Generator[None, None, None]:
        """Log an action and turn WebDriver failures into InteractionError."""
        start = time.monotonic()
        try:
            yield
        except WebDriverException as e:
            duration = time.monotonic() - start
            log_action(action, locator, success=False, duration=duration, error=type(e).__name__)
            reason = f"{type(e).__name__}: {e.msg}" if e.msg else type(e).__name__
            if detail:
                reason = f"{detail} | {reason}"
            raise InteractionError(action, locator, reason) from e
        log_action(action, locator, success=True, duration=time.monotonic() - start)

    def _wait(self, timeout: float | None = None) -> WebDriverWait:
        return WebDriverWait(
            self.driver,
            timeout if timeout is not None else self.timeout,
            poll_frequency=settings.poll_frequency,
        )

    def wait_for_element(
        self,
        locator: str | Locator,
        timeout: float | None = None,
        condition: str = "presence",
    ) -> WebElement:
        """Wait for element to be present or visible.

        Args:
            locator: Locator string or parsed Locator
            timeout: Wait timeout in seconds
            condition: Wait condition (presence, visible)

        Returns:
            WebElement when found

        Raises:
            TimeoutException: If element not found within timeout
        """
        if not isinstance(locator, Locator):
            locator = Locator.parse(locator)
        ec_func = WAIT_CONDITIONS.get(condition, EC.presence_of_element_located)
        return self._wait(timeout).until(ec_func(locator.as_tuple()))

    def _is_visible(self, locator: Locator) -> bool:
        try:
            elements = self.driver.find_elements(*locator.as_tuple())
            return bool(elements) and elements[0].is_displayed()
        except (NoSuchElementException, StaleElementReferenceException):
            return False

    def _press(self, key: str) -> None:
        ActionChains(self.driver).send_keys(key).perform()

    def _type(self, element: WebElement, value: str) -> None:
        for char in value:
            element.send_keys(char)
            if self.typing_delay:
                time.sleep(self.typing_delay)

    # -- navigation ----------------------------------------------------------

    def navigate(self, url: str) -> None:
        """Load a URL and wait until the DOM content is parsed.

        Args:
            url: Target URL
        """
        with self._interaction("navigate", detail=f"url={url}"):
            logger.debug(f"Navigating to: {url}")
            self.driver.get(url)
            self._wait().until(
                lambda d: d.execute_script("return document.readyState") in ("interactive", "complete")
            )

    def navigate_via_link(self, locator: str) -> None:
        """Click a link and wait for the resulting navigation.

        The current document element is captured before the click; the
        call returns once it has gone stale.

        Args:
            locator: Link locator
        """
        parsed = Locator.parse(locator)
        with self._interaction("navigate_via_link", locator):
            old_page = self.driver.find_element(By.TAG_NAME, "html")
            self.wait_for_element(parsed, condition="visible").click()
            self._wait().until(EC.staleness_of(old_page))

    # -- element actions -----------------------------------------------------

    def wait_and_click(self, locator: str) -> None:
        """Wait for the element to be visible, then click it.

        Args:
            locator: Element locator
        """
        parsed = Locator.parse(locator)
        with self._interaction("wait_and_click", locator):
            self.wait_for_element(parsed, condition="visible").click()

    def enter_value(self, locator: str, value: str) -> None:
        """Type a value one keystroke at a time.

        Existing content is kept; each character goes through the page's
        own key handlers.

        Args:
            locator: Input locator
            value: Text to type
        """
        parsed = Locator.parse(locator)
        with self._interaction("enter_value", locator):
            element = self.wait_for_element(parsed, condition="visible")
            self._type(element, value)

    def select_dropdown(self, locator: str, option_label: str) -> None:
        """Select the option whose visible label equals ``option_label``.

        Args:
            locator: <select> locator
            option_label: Visible option text
        """
        parsed = Locator.parse(locator)
        with self._interaction("select_dropdown", locator, detail=f"label={option_label}"):
            element = self.wait_for_element(parsed)
            Select(element).select_by_visible_text(option_label)

    def hover(self, locator: str) -> None:
        """Move the pointer over an element.

        Args:
            locator: Element locator
        """
        parsed = Locator.parse(locator)
        with self._interaction("hover", locator):
            element = self.wait_for_element(parsed, condition="visible")
            ActionChains(self.driver).move_to_element(element).perform()

    def move_to_element(self, locator: str) -> None:
        """Same as hover()."""
        self.hover(locator)

    def highlight_element(self, locator: str) -> None:
        """Call the element's own highlight() inside the page.

        Fails when the page does not give the element a highlight() method.

        Args:
            locator: Element locator
        """
        parsed = Locator.parse(locator)
        with self._interaction("highlight_element", locator):
            element = self.wait_for_element(parsed)
            self.driver.execute_script("arguments[0].highlight();", element)

    def double_click(self, locator: str) -> None:
        """Double-click an element.

        Args:
            locator: Element locator
        """
        parsed = Locator.parse(locator)
        with self._interaction("double_click", locator):
            element = self.wait_for_element(parsed, condition="visible")
            ActionChains(self.driver).double_click(element).perform()

    def is_element_available(self, locator: str) -> bool:
        """Check without waiting whether the element is visible.

        Args:
            locator: Element locator

        Returns:
            True if the first match is displayed, False if there is none
        """
        parsed = Locator.parse(locator)
        with self._interaction("is_element_available", locator):
            return self._is_visible(parsed)

    def upload_file(self, locator: str, file_path: str | Path) -> None:
        """Attach a file to a file input.

        The path is made absolute but not checked for existence.

        Args:
            locator: <input type="file"> locator
            file_path: File to attach
        """
        parsed = Locator.parse(locator)
        with self._interaction("upload_file", locator, detail=f"file={file_path}"):
            element = self.wait_for_element(parsed)
            element.send_keys(str(Path(file_path).absolute()))

    def select_auto_suggestion(
        self,
        locator: str,
        suggestion_text: str,
        container: str | None = None,
    ) -> None:
        """Type into an auto-complete input and pick a suggestion with Enter.

        Without ``container`` the suggestion may be any element on the
        page with that exact text.

        Args:
            locator: Input locator
            suggestion_text: Text to type and to wait for
            container: Locator of the suggestion list to search within
        """
        parsed = Locator.parse(locator)
        with self._interaction("select_auto_suggestion", locator, detail=f"text={suggestion_text}"):
            element = self.wait_for_element(parsed, condition="visible")
            self._type(element, suggestion_text)

            if container is None:
                self.wait_for_element(Locator.text(suggestion_text), condition="visible")
            else:
                scope = self.wait_for_element(Locator.parse(container), condition="visible")
                suggestion = Locator.text(suggestion_text, relative=True)

                def visible_suggestion(_driver: WebDriver) -> WebElement | bool:
                    for candidate in scope.find_elements(*suggestion.as_tuple()):
                        if candidate.is_displayed():
                            return candidate
                    return False

                self._wait().until(visible_suggestion)

            element.send_keys(Keys.ENTER)

    def get_text(self, locator: str) -> str:
        """Get the element's textContent.

        Args:
            locator: Element locator

        Returns:
            Text content, "" when the browser reports none
        """
        parsed = Locator.parse(locator)
        with self._interaction("get_text", locator):
            text = self.wait_for_element(parsed).get_property("textContent")
        return text if text is not None else ""

    def compare_text(self, locator_a: str, locator_b: str) -> bool:
        """Check whether two elements have exactly the same text.

        Args:
            locator_a: First element locator
            locator_b: Second element locator

        Returns:
            True if both texts are identical
        """
        return self.get_text(locator_a) == self.get_text(locator_b)

    # -- alerts --------------------------------------------------------------

    def _handle_native_alert(self, accept: bool) -> bool:
        try:
            alert = self.driver.switch_to.alert
        except NoAlertPresentException:
            return False

        if accept:
            alert.accept()
        else:
            alert.dismiss()
        return True

    def _handle_alert(self, accept: bool) -> None:
        time.sleep(self.alert_grace_period)

        if self._handle_native_alert(accept):
            logger.debug(f"Native alert {'accepted' if accept else 'dismissed'}")
            return

        button = Locator.text("OK" if accept else "Cancel")
        if self._is_visible(button):
            self.driver.find_element(*button.as_tuple()).click()
        else:
            self._press(Keys.ENTER if accept else Keys.ESCAPE)

    def accept_alert(self) -> None:
        """Accept an alert after a short grace period.

        Handles a native alert when one is open, otherwise clicks a visible
        "OK" element, otherwise presses Enter.
        """
        with self._interaction("accept_alert"):
            self._handle_alert(accept=True)

    def dismiss_alert(self) -> None:
        """Dismiss an alert after a short grace period.

        Handles a native alert when one is open, otherwise clicks a visible
        "Cancel" element, otherwise presses Escape.
        """
        with self._interaction("dismiss_alert"):
            self._handle_alert(accept=False)

    def capture_and_accept_alert(self, timeout: float | None = None) -> str:
        """Wait for a native alert, accept it and return its message.

        This blocks until the dialog opens. It does not register a
        fire-and-forget listener that returns "" before any dialog
        appears. When nothing opens within the timeout it raises rather
        than returning an empty message.

        Args:
            timeout: Seconds to wait for the dialog

        Returns:
            Alert message

        Raises:
            InteractionError: If no alert appears in time
        """
        with self._interaction("capture_and_accept_alert"):
            alert = self._wait(timeout).until(EC.alert_is_present())
            message = alert.text
            alert.accept()

        logger.debug(f"Captured alert text (length={len(message or '')})")
        return message or ""

    # -- data helpers --------------------------------------------------------

    @staticmethod
    def generate_random_value(length: int, kind: data.ValueKind | str) -> str:
        """See helpers.data.generate_random_value."""
        return data.generate_random_value(length, kind)

    @staticmethod
    def get_current_date(fmt: str | None = None) -> str:
        return data.get_current_date(fmt)

    @staticmethod
    def get_current_time(fmt: str | None = None) -> str:
        return data.get_current_time(fmt)

    @staticmethod
    def change_date_format(
        input_date: str,
        input_format: str | None = None,
        output_format: str | None = None,
    ) -> str:
        return data.change_date_format(input_date, input_format, output_format)

    @staticmethod
    def convert_to_money_format(amount: str) -> str:
        return data.convert_to_money_format(amount)
