"""Unsynchronized lazy value for single-threaded code."""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from lazyval.core.base import BaseLazy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SingleThreadLazy(BaseLazy[T]):
    """Lazy value without any internal synchronization.

    The caller must guarantee that ``get()`` is never called concurrently.
    Concurrent use may run the supplier more than once; that is outside this
    class's contract rather than an error it reports. Use ``MultiThreadLazy``
    when the value is shared between threads.

    - On the first call the supplier runs and its result is cached.
    - Later calls return the cached result.
    - The supplier reference is dropped after it succeeds.
    - If the supplier raises, the error propagates and the next call retries.
    """

    def __init__(self, supplier: Callable[[], T]) -> None:
        super().__init__(supplier)
        self._value: Optional[T] = None
        self._computed = False

    @property
    def is_value_created(self) -> bool:
        return self._computed

    def get(self) -> T:
        if not self._computed:
            try:
                self._value = self._supplier()
            except Exception:
                logger.debug("Supplier failed; %s left uncomputed", type(self).__name__)
                raise
            self._computed = True
            self._supplier = None
        return self._value

    def _peek(self) -> object:
        return self._value
