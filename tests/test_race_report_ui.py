from rich.console import Console

from lazyval.core.types import LazyMode
from lazyval.race import RaceReport, RetryAttempt
from lazyval.ui.report import race_verdict, render_race_report, render_retry_attempts, summarize_results


def _console() -> Console:
    return Console(record=True, width=100, color_system=None)


def test_render_race_report_shows_success_verdict() -> None:
    report = RaceReport(
        mode=LazyMode.MULTI_THREAD,
        threads=3,
        supplier_calls=1,
        results=[777, 777, 777],
        elapsed_seconds=0.051,
    )
    console = _console()

    render_race_report(console, report)

    text = console.export_text()
    assert race_verdict(report) is True
    assert "multi_thread" in text
    assert "Supplier calls: 1" in text
    assert "supplier ran once, all threads agree" in text


def test_render_race_report_flags_single_thread_and_duplicates() -> None:
    report = RaceReport(
        mode=LazyMode.SINGLE_THREAD,
        threads=2,
        supplier_calls=2,
        results=[object(), object()],
        elapsed_seconds=0.0,
    )
    console = _console()

    render_race_report(console, report)

    text = console.export_text()
    assert race_verdict(report) is False
    assert "not safe for concurrent use" in text
    assert "supplier ran more than once" in text


def test_render_retry_attempts_lists_each_outcome() -> None:
    console = _console()

    render_retry_attempts(
        console,
        [
            RetryAttempt(attempt=1, ok=False, error="SupplierFailure: first"),
            RetryAttempt(attempt=2, ok=True, value=9),
        ],
    )

    text = console.export_text()
    assert "attempt 1: failed -> SupplierFailure: first" in text
    assert "attempt 2: ok -> 9" in text


def test_summarize_results_collapses_duplicates() -> None:
    assert summarize_results([1, 1, 2]) == "1, 2"
    assert summarize_results(list(range(7)), limit=3) == "0, 1, 2, ... (7 distinct)"
