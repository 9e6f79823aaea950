"""Type definitions, keypad records and result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle used as a button hit region."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, px: int, py: int) -> bool:
        """Return True if (px, py) lies inside the rectangle, edges included."""
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )


@dataclass(frozen=True)
class ButtonSpec:
    """One keypad key: its display label and hit region."""

    label: str
    rect: Rect


@dataclass
class EvalResult:
    """Result of evaluating a keypad expression."""

    ok: bool
    result: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        return f"EvalResult(ok=True, result={self.result!r})"


class ParseError(Exception):
    """Raised when an expression does not have the shape `number op number`."""

    def __init__(self, message: str, code: str = "PARSE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class StartupError(Exception):
    """Raised when the window, renderer or font cannot be initialized."""

    def __init__(self, message: str, code: str = "STARTUP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
