"""lazyval package entrypoint and public API."""

from __future__ import annotations

from lazyval.core import (
    BaseLazy,
    LazyMode,
    LazyProxy,
    LazyValue,
    MultiThreadLazy,
    SingleThreadLazy,
    create_lazy,
)
from lazyval.errors import InvalidSupplierError, LazyError

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__license__",
    "BaseLazy",
    "InvalidSupplierError",
    "LazyError",
    "LazyMode",
    "LazyProxy",
    "LazyValue",
    "MultiThreadLazy",
    "SingleThreadLazy",
    "create_lazy",
]
