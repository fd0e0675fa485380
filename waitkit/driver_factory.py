# waitkit/driver_factory.py
import logging
from typing import Callable, Tuple

from selenium import webdriver
from selenium.webdriver.chrome.options import Options

logger = logging.getLogger("framework.driver")


def create_selenium_driver(
    headless: bool = True, implicit_wait: int = 0, window_size: Tuple[int, int] = (1920, 1080)
) -> Tuple[str, object, Callable]:
    opts = Options()
    if headless:
        # modern headless mode
        opts.add_argument("--headless=new")
        opts.add_argument("--no-sandbox")
    opts.add_argument("--window-size=%d,%d" % tuple(window_size))
    opts.add_argument("--disable-dev-shm-usage")
    # Let Selenium Manager handle driver resolution (Selenium >= 4.10)
    driver = webdriver.Chrome(options=opts)
    # Waits polls with find_element; any implicit wait is added to every poll
    driver.implicitly_wait(int(implicit_wait))
    logger.info(
        "Started Chrome (headless=%s, window=%sx%s, implicit_wait=%ss)", headless, window_size[0], window_size[1], implicit_wait
    )

    def cleanup():
        try:
            driver.quit()
        except Exception:
            logger.warning("driver.quit() failed during cleanup", exc_info=True)

    return ("selenium", driver, cleanup)


def screenshot_bytes_from_selenium(driver) -> bytes:
    """Return PNG bytes for the current page (Selenium)."""
    return driver.get_screenshot_as_png()
