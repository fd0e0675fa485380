# conftest.py
import logging

import pytest

from waitkit.config import CONFIG_PATH, load_config
from waitkit.driver_factory import create_selenium_driver, screenshot_bytes_from_selenium
from waitkit.waits import Waits


@pytest.fixture(scope="session")
def config():
    """
    Load config.ini and return a merged dict of DEFAULT + chosen environment section
    (selected by $ENV). The parsed WaitConfig lives under config["waits"].
    """
    return load_config(CONFIG_PATH)


@pytest.fixture(scope="session")
def driver(config):
    """Create a Selenium driver for the session and yield it."""
    headless = config.get("headless", True)
    implicit_wait = config.get("implicit_wait", 0)
    window_size = config.get("window_size", (1920, 1080))
    _, drv, cleanup = create_selenium_driver(headless=headless, implicit_wait=implicit_wait, window_size=window_size)
    drv.get(config.get("base_url", "about:blank"))
    yield drv
    cleanup()


# ReportPortal logger setup (best effort). Uses pytest-reportportal RPLogger if available.
try:
    from pytest_reportportal import RPLogger, RPLogHandler
except ImportError:
    RPLogger = None
    RPLogHandler = None


@pytest.fixture(scope="session")
def rp_logger(request):
    """
    Returns a logger that writes to ReportPortal if the plugin is active, otherwise a standard logger.
    """
    rp_service = getattr(request.node.config, "py_test_service", None)
    if RPLogger is None or rp_service is None:
        # fallback: basic StdOut logger
        logger = logging.getLogger("framework")
        if not logger.handlers:
            ch = logging.StreamHandler()
            ch.setLevel(logging.INFO)
            logger.addHandler(ch)
        return logger

    logging.setLoggerClass(RPLogger)
    logger = logging.getLogger("framework")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(RPLogHandler(rp_service))
    return logger


@pytest.fixture(scope="session")
def waits(driver, config, rp_logger):
    """Waits helpers bound to the live session driver, configured from config.ini."""
    return Waits(driver, config=config["waits"], logger=rp_logger)


# Attach screenshot to ReportPortal when test fails (if plugin is active)
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    On test failure during the 'call' phase, capture a Selenium screenshot and post to ReportPortal
    (if pytest-reportportal plugin exposed py_test_service on the config).
    """
    outcome = yield
    rep = outcome.get_result()

    if rep.when == "call" and rep.failed:
        driver_fixture = item.funcargs.get("driver")
        rp_service = getattr(item.config, "py_test_service", None)
        if driver_fixture and rp_service:
            try:
                data = screenshot_bytes_from_selenium(driver_fixture)
                rp_service.post_log(
                    item.name,
                    "ERROR",
                    message="Failure screenshot",
                    attachment={"name": "screenshot.png", "data": data},
                )
            except Exception:
                # Never fail the test run because screenshot logic failed
                logging.getLogger("framework").exception("Failed to capture/post screenshot for failed test.")
