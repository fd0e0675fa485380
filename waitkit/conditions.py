# waitkit/conditions.py
"""
Condition callables for WebDriverWait.until.

Each factory takes element handles and returns a function of the driver that
returns something truthy (usually the WebElement) once the condition holds and
False otherwise.
"""
from typing import Sequence

from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException
from selenium.webdriver.support import expected_conditions as EC

from waitkit.elements import ElementHandle

# Scrolls the element to the middle of the viewport, then returns true when the element
# (or one of its descendants) is what a click at its centre would hit.
TOPMOST_SCRIPT = """
var el = arguments[0];
el.scrollIntoView({block: 'center', inline: 'center'});
var rect = el.getBoundingClientRect();
var x = rect.left + rect.width / 2;
var y = rect.top + rect.height / 2;
var hit = document.elementFromPoint(x, y);
return hit !== null && (hit === el || el.contains(hit));
"""


def displayed(handle: ElementHandle):
    return EC.visibility_of_element_located(handle.locator)


def _visible_or_false(handle: ElementHandle, driver):
    try:
        return displayed(handle)(driver)
    except (NoSuchElementException, StaleElementReferenceException):
        return False


def any_displayed(handles: Sequence[ElementHandle]):
    def _predicate(driver):
        for handle in handles:
            element = _visible_or_false(handle, driver)
            if element:
                return element
        return False

    return _predicate


def all_displayed(handles: Sequence[ElementHandle]):
    def _predicate(driver):
        elements = []
        for handle in handles:
            element = _visible_or_false(handle, driver)
            if not element:
                return False
            elements.append(element)
        return elements

    return _predicate


def clickable(handle: ElementHandle, check_obscured: bool = True):
    to_be_clickable = EC.element_to_be_clickable(handle.locator)

    def _predicate(driver):
        element = to_be_clickable(driver)
        if not element:
            return False
        if check_obscured and not driver.execute_script(TOPMOST_SCRIPT, element):
            return False
        return element

    return _predicate


def hidden(handle: ElementHandle):
    return EC.invisibility_of_element_located(handle.locator)


def count_equals(elements: ElementHandle, expected: int):
    def _predicate(driver):
        found = driver.find_elements(*elements.locator)
        # an empty list is falsy, so wrap it for the expected == 0 case
        return (found,) if len(found) == expected else False

    return _predicate
