"""Lazy proxy that instantiates a target object on first use."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from lazyval.core.multi_thread import MultiThreadLazy

T = TypeVar("T")


class LazyProxy(Generic[T]):
    """Thread-safe lazy proxy that forwards attribute access to its target."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._lazy_target: MultiThreadLazy[T] = MultiThreadLazy(factory)

    @property
    def is_value_created(self) -> bool:
        return self._lazy_target.is_value_created

    def get_if_initialized(self) -> Optional[T]:
        if not self._lazy_target.is_value_created:
            return None
        return self._lazy_target.get()

    def get(self) -> T:
        return self._lazy_target.get()

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found on the proxy itself.
        if name.startswith("_lazy"):
            raise AttributeError(name)
        return getattr(self.get(), name)

    def __repr__(self) -> str:
        return f"LazyProxy({self._lazy_target!r})"
