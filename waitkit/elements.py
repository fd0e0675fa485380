# waitkit/elements.py
from typing import List, Optional, Tuple

from selenium.webdriver.common.by import By

Locator = Tuple[str, str]


class ElementHandle:
    """
    Lazy reference to a single node in the page.

    Nothing is looked up until a wait or an interaction needs it, so a handle
    can be created before the element exists. The description is what shows
    up in timeout messages and logs.
    """

    def __init__(self, by: str, value: str, description: Optional[str] = None):
        self.by = by
        self.value = value
        self.description = description

    @classmethod
    def css(cls, selector: str, description: Optional[str] = None):
        return cls(By.CSS_SELECTOR, selector, description)

    @classmethod
    def xpath(cls, expr: str, description: Optional[str] = None):
        return cls(By.XPATH, expr, description)

    @property
    def locator(self) -> Locator:
        return (self.by, self.value)

    def resolve(self, driver):
        return driver.find_element(*self.locator)

    def __str__(self):
        if self.description:
            return self.description
        return f"{self.by} '{self.value}'"

    def __repr__(self):
        return f"{type(self).__name__}({self.by!r}, {self.value!r})"


class ElementList(ElementHandle):
    """Same locator, but resolved with find_elements (may be empty)."""

    def resolve(self, driver) -> List:
        return list(driver.find_elements(*self.locator))
