from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A successful scan. The value may itself be empty (e.g. ``Found("")``)."""

    value: T

    @property
    def found(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True

    def unwrap_or(self, default: object) -> T:
        return self.value


@dataclass(frozen=True)
class NotFound:
    """No match. Distinct from an empty match."""

    @property
    def found(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def unwrap_or(self, default: T) -> T:
        return default


NOT_FOUND = NotFound()

ScanResult = Union[Found[T], NotFound]


def require_text(text: object) -> str:
    """Reject non-string input; malformed strings are never an error, missing ones are."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text
