"""Build a lazy value for a concurrency mode."""

from __future__ import annotations

from typing import Callable, Dict, Type, TypeVar, Union

from lazyval.core.base import BaseLazy
from lazyval.core.multi_thread import MultiThreadLazy
from lazyval.core.single_thread import SingleThreadLazy
from lazyval.core.types import LazyMode, LazyValue

T = TypeVar("T")

_VARIANTS: Dict[LazyMode, Type[BaseLazy]] = {
    LazyMode.SINGLE_THREAD: SingleThreadLazy,
    LazyMode.MULTI_THREAD: MultiThreadLazy,
}


def create_lazy(
    supplier: Callable[[], T],
    mode: Union[str, LazyMode] = LazyMode.MULTI_THREAD,
) -> LazyValue[T]:
    """Create the lazy value variant for ``mode``.

    Usage:
        settings = create_lazy(load_settings)
        # Later, from any thread:
        value = settings.get()
    """
    variant = _VARIANTS[LazyMode.from_value(mode)]
    return variant(supplier)
