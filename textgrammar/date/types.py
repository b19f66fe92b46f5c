from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("", "0", "false", "no", "off")


@dataclass(frozen=True)
class ParsedDate:
    """A civil date-time read from a date string. Always UTC.

    `month` is 0-based (0 = January). Fields hold the literal values from the
    input; they are only range-checked when the policy asks for it.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    tz = timezone.utc

    @property
    def month_number(self) -> int:
        return self.month + 1

    @property
    def is_pm(self) -> bool:
        return self.hour >= 12

    def to_datetime(self) -> datetime:
        """Raises ValueError if the literal fields are not a real calendar instant."""
        return datetime(
            self.year,
            self.month_number,
            self.day,
            self.hour,
            self.minute,
            self.second,
            tzinfo=self.tz,
        )


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class DatePolicy:
    """Controls optional date checks.

    - structural parsing is always done; range validation is optional.
    - two-digit years at or above the pivot are 19xx, below it 20xx.
    """

    validate_ranges: bool = False
    two_digit_pivot: int = 70

    def __post_init__(self) -> None:
        if not 0 <= self.two_digit_pivot <= 99:
            raise ValueError(f"two_digit_pivot must be within 0-99, got {self.two_digit_pivot}")

    @classmethod
    def from_env(cls, dotenv_path: Path | None = None) -> "DatePolicy":
        load_dotenv(dotenv_path)
        pivot = os.environ.get("TEXTGRAMMAR_TWO_DIGIT_PIVOT", "").strip()
        try:
            pivot_i = int(pivot) if pivot else 70
        except ValueError:
            raise ValueError(f"TEXTGRAMMAR_TWO_DIGIT_PIVOT must be an integer, got {pivot!r}") from None
        return cls(
            validate_ranges=_env_flag("TEXTGRAMMAR_VALIDATE_DATES", False),
            two_digit_pivot=pivot_i,
        )
