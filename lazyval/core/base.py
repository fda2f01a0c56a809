"""Base class shared by the lazy value variants."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from lazyval.errors import InvalidSupplierError

T = TypeVar("T")


class BaseLazy(Generic[T]):
    """Holds and validates the supplier for a compute-once value."""

    def __init__(self, supplier: Callable[[], T]) -> None:
        if supplier is None:
            raise InvalidSupplierError("supplier must not be None")
        if not callable(supplier):
            raise InvalidSupplierError(f"supplier must be callable, got {type(supplier).__name__}")
        self._supplier: Optional[Callable[[], T]] = supplier

    @property
    def is_value_created(self) -> bool:
        raise NotImplementedError

    def get(self) -> T:
        """Implement in subclasses."""
        raise NotImplementedError

    def _peek(self) -> object:
        raise NotImplementedError

    def __repr__(self) -> str:
        if not self.is_value_created:
            return f"{type(self).__name__}(<not created>)"
        return f"{type(self).__name__}({self._peek()!r})"
