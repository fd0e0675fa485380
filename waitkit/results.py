# waitkit/results.py
import enum
from dataclasses import dataclass
from typing import Optional


class Lookup(enum.Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class VisibilityResult:
    """Outcome of a single visibility probe; error is set only for NOT_FOUND."""

    state: Lookup
    error: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.state is not Lookup.NOT_FOUND

    @property
    def visible(self) -> bool:
        return self.state is Lookup.VISIBLE

    def __bool__(self):
        return self.visible
