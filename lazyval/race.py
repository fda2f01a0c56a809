"""Race and retry harness for exercising lazy values under contention."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from lazyval.core.factory import create_lazy
from lazyval.core.types import LazyMode

logger = logging.getLogger(__name__)

RACE_THREAD_PREFIX = "lazyval-race-"

_NO_RESULT = object()


class SupplierFailure(RuntimeError):
    """Raised by a CountingSupplier on a scheduled failure."""


class CountingSupplier:
    """Instrumented supplier that counts its invocations.

    Sleeps ``delay_seconds`` before returning ``value`` and raises
    ``SupplierFailure`` on its first ``failures`` invocations.
    """

    def __init__(self, value: Any, *, delay_seconds: float = 0.0, failures: int = 0) -> None:
        self.value = value
        self.delay_seconds = max(0.0, float(delay_seconds))
        self.failures = max(0, int(failures))
        self._lock = threading.Lock()
        self._calls = 0

    @property
    def calls(self) -> int:
        with self._lock:
            return self._calls

    def __call__(self) -> Any:
        with self._lock:
            self._calls += 1
            call_number = self._calls
        if self.delay_seconds:
            time.sleep(self.delay_seconds)
        if call_number <= self.failures:
            raise SupplierFailure(f"scheduled failure {call_number} of {self.failures}")
        return self.value


class RaceReport(BaseModel):
    """Outcome of one race between threads on a single lazy value."""

    model_config = ConfigDict(extra="forbid")

    mode: LazyMode
    threads: int = Field(ge=1)
    supplier_calls: int = Field(ge=0)
    results: List[Any] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    elapsed_seconds: float = Field(ge=0)

    @property
    def single_invocation(self) -> bool:
        return self.supplier_calls == 1

    @property
    def consistent(self) -> bool:
        if self.errors or len(self.results) != self.threads:
            return False
        first = self.results[0]
        return all(result == first for result in self.results)


class RetryAttempt(BaseModel):
    model_config = ConfigDict(extra="forbid")

    attempt: int = Field(ge=1)
    ok: bool
    value: Any = None
    error: Optional[str] = None


def run_race(
    supplier: Callable[[], Any],
    *,
    threads: int = 10,
    mode: Union[str, LazyMode] = LazyMode.MULTI_THREAD,
    supplier_calls: Optional[Callable[[], int]] = None,
) -> RaceReport:
    """Release ``threads`` threads together against one lazy value.

    ``supplier_calls`` reports how many times the supplier ran; it defaults to
    the ``calls`` attribute of a ``CountingSupplier``.
    """
    if threads < 1:
        raise ValueError(f"threads must be >= 1, got {threads}")

    resolved_mode = LazyMode.from_value(mode)
    if supplier_calls is None:
        if not isinstance(supplier, CountingSupplier):
            raise ValueError("supplier_calls is required unless supplier is a CountingSupplier")
        counter = supplier

        def supplier_calls() -> int:
            return counter.calls

    lazy = create_lazy(supplier, resolved_mode)
    barrier = threading.Barrier(threads)
    results: List[Any] = [_NO_RESULT] * threads
    failures: List[Optional[str]] = [None] * threads

    def _worker(index: int) -> None:
        try:
            barrier.wait()
            results[index] = lazy.get()
        except threading.BrokenBarrierError:
            failures[index] = "BrokenBarrierError: race aborted before start"
        except BaseException as exc:
            failures[index] = f"{type(exc).__name__}: {exc}"

    workers = [
        threading.Thread(target=_worker, args=(index,), name=f"{RACE_THREAD_PREFIX}{index}")
        for index in range(threads)
    ]
    started = time.perf_counter()
    launched: List[threading.Thread] = []
    try:
        for worker in workers:
            worker.start()
            launched.append(worker)
    except BaseException:
        barrier.abort()
        for worker in launched:
            worker.join()
        raise
    for worker in workers:
        worker.join()
    elapsed = time.perf_counter() - started

    for index, result in enumerate(results):
        if result is _NO_RESULT and failures[index] is None:
            failures[index] = "NoResult: worker finished without a value"

    errors = [failure for failure in failures if failure is not None]
    report = RaceReport(
        mode=resolved_mode,
        threads=threads,
        supplier_calls=supplier_calls(),
        results=[result for result, failure in zip(results, failures) if failure is None],
        errors=errors,
        elapsed_seconds=elapsed,
    )
    logger.info(
        "Race finished mode=%s threads=%d supplier_calls=%d errors=%d elapsed=%.3fs",
        resolved_mode.value,
        threads,
        report.supplier_calls,
        len(errors),
        elapsed,
    )
    return report


def run_retry(
    supplier: Callable[[], Any],
    *,
    attempts: int = 3,
    mode: Union[str, LazyMode] = LazyMode.MULTI_THREAD,
) -> List[RetryAttempt]:
    """Call ``get()`` sequentially ``attempts`` times on one lazy value."""
    if attempts < 1:
        raise ValueError(f"attempts must be >= 1, got {attempts}")

    lazy = create_lazy(supplier, mode)
    outcomes: List[RetryAttempt] = []
    for attempt in range(1, attempts + 1):
        try:
            value = lazy.get()
        except Exception as exc:
            logger.info("Attempt %d failed: %s", attempt, exc)
            outcomes.append(RetryAttempt(attempt=attempt, ok=False, error=f"{type(exc).__name__}: {exc}"))
            continue
        outcomes.append(RetryAttempt(attempt=attempt, ok=True, value=value))
    return outcomes
