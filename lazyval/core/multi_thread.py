"""Thread-safe lazy value using double-checked locking."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Tuple, TypeVar

from lazyval.core.base import BaseLazy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MultiThreadLazy(BaseLazy[T]):
    """Thread-safe lazy value.

    - If the value is already created, ``get()`` returns it without locking.
    - Otherwise the instance lock ensures the supplier runs only once.
    - Threads queued on the lock re-check after acquiring it and reuse the
      value computed by the winner.
    - If the supplier raises, the error propagates to the caller that ran it and
      the next thread to take the lock retries.

    The computed state and the value are published together as one immutable
    cell stored in a single attribute. A reader that sees the cell sees the
    value inside it, so the fast path never observes "computed" ahead of the
    value it guards.
    """

    def __init__(self, supplier: Callable[[], T]) -> None:
        super().__init__(supplier)
        self._cell: Optional[Tuple[T]] = None
        self._lock = threading.Lock()

    @property
    def is_value_created(self) -> bool:
        return self._cell is not None

    def get(self) -> T:
        cell = self._cell
        if cell is not None:
            return cell[0]

        with self._lock:
            cell = self._cell
            if cell is None:
                try:
                    value = self._supplier()
                except Exception:
                    logger.debug("Supplier failed; %s left uncomputed", type(self).__name__)
                    raise
                cell = (value,)
                self._cell = cell
                self._supplier = None
                logger.debug("%s computed value on thread %s", type(self).__name__, threading.current_thread().name)
        return cell[0]

    def _peek(self) -> object:
        cell = self._cell
        return cell[0] if cell is not None else None
