# waitkit/waits.py
import logging
from typing import List, Optional, Sequence

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.support.ui import WebDriverWait

from waitkit import conditions
from waitkit.config import WaitConfig
from waitkit.elements import ElementHandle
from waitkit.results import Lookup, VisibilityResult

logger = logging.getLogger("framework.waits")

NOT_FOUND_ERRORS = (NoSuchElementException, StaleElementReferenceException)


class Waits:
    """
    Explicit-wait and interaction helpers bound to one driver.

    Every wait polls a condition through WebDriverWait until it holds or the
    timeout (seconds; None means config.default_timeout) runs out, in which
    case selenium's TimeoutException is raised with the element's description
    in the message. check_visibility/is_visible are the only helpers that
    turn a missing element into a value instead of an error.
    """

    def __init__(self, driver, config: Optional[WaitConfig] = None, logger=None):
        self.driver = driver
        self.config = config or WaitConfig()
        self.rp_logger = logger

    def _log(self, level, msg, *args, **kwargs):
        try:
            # rp_logger can be RPLogger or standard logger
            getattr(self.rp_logger or logger, level)(msg, *args, **kwargs)
        except Exception:
            # fallback to module logger
            getattr(logger, level)(msg, *args, **kwargs)

    def _timeout(self, timeout: Optional[float]) -> float:
        if timeout is None:
            return self.config.default_timeout
        if timeout < 0:
            raise ValueError(f"timeout must be >= 0, got {timeout}")
        return float(timeout)

    def _until(self, condition, timeout: Optional[float], what: str):
        seconds = self._timeout(timeout)
        wait = WebDriverWait(
            self.driver,
            seconds,
            poll_frequency=self.config.poll_interval,
            ignored_exceptions=NOT_FOUND_ERRORS,
        )
        message = f"Timed out after {seconds}s waiting for {what}"
        self._log("debug", "Waiting up to %ss for %s", seconds, what)
        try:
            return wait.until(condition, message)
        except TimeoutException:
            self._log("error", message)
            raise

    @staticmethod
    def _describe(handles: Sequence[ElementHandle]) -> str:
        return "[" + ", ".join(str(h) for h in handles) + "]"

    # visibility

    def wait_until_displayed(self, element: ElementHandle, timeout: Optional[float] = None):
        return self._until(conditions.displayed(element), timeout, f"{element} to be displayed")

    def wait_until_any_displayed(self, elements: Sequence[ElementHandle], timeout: Optional[float] = None):
        elements = list(elements)
        return self._until(
            conditions.any_displayed(elements), timeout, f"any of {self._describe(elements)} to be displayed"
        )

    def wait_until_all_displayed(self, elements: Sequence[ElementHandle], timeout: Optional[float] = None) -> List:
        elements = list(elements)
        return self._until(
            conditions.all_displayed(elements), timeout, f"all of {self._describe(elements)} to be displayed"
        )

    def check_visibility(self, element: ElementHandle) -> VisibilityResult:
        """Single lookup, no waiting. A missing or detached element is NOT_FOUND, not an error."""
        try:
            displayed = element.resolve(self.driver).is_displayed()
        except NOT_FOUND_ERRORS as exc:
            if self.config.log_suppressed_errors:
                self._log("debug", "%s not found while checking visibility: %s", element, exc)
            return VisibilityResult(Lookup.NOT_FOUND, error=exc)
        return VisibilityResult(Lookup.VISIBLE if displayed else Lookup.HIDDEN)

    def is_visible(self, element: ElementHandle) -> bool:
        return self.check_visibility(element).visible

    # interaction

    def wait_until_clickable(self, element: ElementHandle, timeout: Optional[float] = None):
        return self._until(
            conditions.clickable(element, check_obscured=self.config.check_obscured), timeout, f"{element} to be clickable"
        )

    def click(self, element: ElementHandle, timeout: Optional[float] = None):
        self.wait_until_clickable(element, timeout).click()

    def wait_until_hidden(self, element: ElementHandle, timeout: Optional[float] = None):
        self._until(conditions.hidden(element), timeout, f"{element} to be hidden")

    def get_records_count(self, table: ElementHandle) -> int:
        rows = table.resolve(self.driver).find_elements(By.CSS_SELECTOR, "tbody tr")
        return len(rows)

    def wait_until_count(self, elements: ElementHandle, expected_count: int, timeout: Optional[float] = None) -> List:
        if isinstance(expected_count, bool) or not isinstance(expected_count, int) or expected_count < 0:
            raise ValueError(f"expected_count must be a non-negative int, got {expected_count!r}")
        (found,) = self._until(
            conditions.count_equals(elements, expected_count), timeout, f"{elements} to number {expected_count}"
        )
        return found

    def select_last_option(self, dropdown: ElementHandle):
        options = dropdown.resolve(self.driver).find_elements(By.TAG_NAME, "option")
        if not options:
            raise NoSuchElementException(f"No option elements in {dropdown}")
        last = options[-1]
        last.click()
        return last

    def clear(self, element: ElementHandle):
        """
        Empty a text input with select-all followed by DELETE and BACKSPACE.
        Some widgets ignore element.clear() or a single delete key, hence both.
        """
        target = element.resolve(self.driver)
        # two calls: the modifier stays pressed until the end of a send_keys call
        target.send_keys(self.config.modifier_key, "a")
        target.send_keys(Keys.DELETE, Keys.BACKSPACE)
