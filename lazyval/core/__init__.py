"""Compute-once lazy values."""

from lazyval.core.base import BaseLazy
from lazyval.core.factory import create_lazy
from lazyval.core.multi_thread import MultiThreadLazy
from lazyval.core.proxy import LazyProxy
from lazyval.core.single_thread import SingleThreadLazy
from lazyval.core.types import LazyMode, LazyValue

__all__ = [
    "BaseLazy",
    "LazyMode",
    "LazyProxy",
    "LazyValue",
    "MultiThreadLazy",
    "SingleThreadLazy",
    "create_lazy",
]
