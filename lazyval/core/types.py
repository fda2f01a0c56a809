"""Shared lazy value contract and types."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, TypeVar, Union, runtime_checkable

T_co = TypeVar("T_co", covariant=True)

_MODE_ALIASES = {
    "single": "single_thread",
    "multi": "multi_thread",
}


@runtime_checkable
class LazyValue(Protocol[T_co]):
    """A value computed from a supplier on first access and cached thereafter."""

    @property
    def is_value_created(self) -> bool:
        ...

    def get(self) -> T_co:
        ...


class LazyMode(str, Enum):
    """Concurrency mode of a lazy value."""

    SINGLE_THREAD = "single_thread"
    MULTI_THREAD = "multi_thread"

    @classmethod
    def from_value(cls, value: Union[str, "LazyMode"]) -> "LazyMode":
        """Convert a raw value or short alias to a mode enum."""
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().lower().replace("-", "_")
        normalized = _MODE_ALIASES.get(normalized, normalized)
        for mode in cls:
            if mode.value == normalized:
                return mode
        raise ValueError(f"Unsupported lazy mode: {value}")
