# waitkit/config.py
import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from selenium.webdriver.common.keys import Keys

# Path to config.ini (adjust if you keep config elsewhere)
CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.ini"


def _as_bool(value, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() == "true"


def _as_size(value) -> Tuple[int, int]:
    """Parse "1920x1080" or "1920,1080" into (width, height)."""
    width, height = str(value).lower().replace(",", "x").split("x")
    size = (int(width), int(height))
    if min(size) <= 0:
        raise ValueError(f"window_size must be positive, got {value!r}")
    return size


@dataclass(frozen=True)
class WaitConfig:
    """
    Settings shared by every helper on a Waits instance:
      - default_timeout: seconds a wait runs when the caller passes no timeout
      - poll_interval: seconds between condition checks
      - log_suppressed_errors: log the lookup error that is_visible swallows
      - check_obscured: clickable also means topmost at the element's centre
      - select_all_modifier: name of the Keys attribute clear() holds with 'a'
    """

    default_timeout: float = 30.0
    poll_interval: float = 0.5
    log_suppressed_errors: bool = False
    check_obscured: bool = True
    select_all_modifier: str = "CONTROL"

    def __post_init__(self):
        if self.default_timeout < 0:
            raise ValueError(f"default_timeout must be >= 0, got {self.default_timeout}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be > 0, got {self.poll_interval}")
        if not hasattr(Keys, self.select_all_modifier):
            raise ValueError(f"Unknown select_all_modifier key: {self.select_all_modifier!r}")

    @property
    def modifier_key(self) -> str:
        return getattr(Keys, self.select_all_modifier)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "WaitConfig":
        """Build from raw config.ini strings; missing keys keep their defaults."""
        defaults = cls()
        timeout_ms = values.get("default_timeout_ms")
        return cls(
            default_timeout=int(timeout_ms) / 1000.0 if timeout_ms is not None else defaults.default_timeout,
            poll_interval=float(values.get("poll_interval", defaults.poll_interval)),
            log_suppressed_errors=_as_bool(values.get("log_suppressed_errors"), defaults.log_suppressed_errors),
            check_obscured=_as_bool(values.get("check_obscured"), defaults.check_obscured),
            select_all_modifier=str(values.get("select_all_modifier", defaults.select_all_modifier)).strip().upper(),
        )


def load_config(path=CONFIG_PATH, env: Optional[str] = None) -> Dict[str, Any]:
    """
    Read config.ini and return a merged dict of DEFAULT + the chosen environment
    section. The environment comes from `env`, then $ENV, then DEFAULT.environment.
    The wait settings are parsed into a WaitConfig under the "waits" key.
    """
    cfg = configparser.ConfigParser()
    cfg.read(path)

    env = env or os.getenv("ENV", cfg["DEFAULT"].get("environment", "local"))
    env_cfg = dict(cfg["DEFAULT"])
    if env in cfg:
        env_cfg.update(dict(cfg[env]))

    # Normalise types
    env_cfg["environment"] = env
    env_cfg["base_url"] = env_cfg.get("base_url", "about:blank")
    env_cfg["headless"] = _as_bool(env_cfg.get("headless", "true"))
    env_cfg["implicit_wait"] = int(env_cfg.get("implicit_wait", 0))
    env_cfg["window_size"] = _as_size(env_cfg.get("window_size", "1920x1080"))
    env_cfg["waits"] = WaitConfig.from_mapping(env_cfg)
    return env_cfg
