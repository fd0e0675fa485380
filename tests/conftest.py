# tests/conftest.py
import pytest

from fakes import FakeDriver
from waitkit.config import WaitConfig
from waitkit.waits import Waits


@pytest.fixture
def fast_config():
    """Short timeout and tight polling so timeouts in unit tests cost well under a second."""
    return WaitConfig(default_timeout=0.3, poll_interval=0.02)


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def helpers(fake_driver, fast_config):
    return Waits(fake_driver, config=fast_config)
