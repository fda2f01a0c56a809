"""Rich rendering helpers for race and retry results."""

from __future__ import annotations

from typing import List, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from lazyval.core.types import LazyMode
from lazyval.race import RaceReport, RetryAttempt

_OK_STYLE = Style(color="green", bold=True)
_FAIL_STYLE = Style(color="red", bold=True)
_LABEL_STYLE = Style(dim=True)
_VALUE_STYLE = Style(color="bright_yellow")


def _field(text: Text, label: str, value: object) -> None:
    text.append(f"  {label}: ", style=_LABEL_STYLE)
    text.append(f"{value}\n", style=_VALUE_STYLE)


def race_verdict(report: RaceReport) -> bool:
    return report.single_invocation and report.consistent


def summarize_results(results: Sequence[object], limit: int = 5) -> str:
    distinct: List[str] = []
    for result in results:
        rendered = repr(result)
        if rendered not in distinct:
            distinct.append(rendered)
    if len(distinct) > limit:
        return ", ".join(distinct[:limit]) + f", ... ({len(distinct)} distinct)"
    return ", ".join(distinct)


def render_race_report(console: Console, report: RaceReport) -> None:
    body = Text()
    _field(body, "Mode", report.mode.value)
    _field(body, "Threads", report.threads)
    _field(body, "Supplier calls", report.supplier_calls)
    _field(body, "Results", summarize_results(report.results) or "none")
    if report.errors:
        _field(body, "Errors", len(report.errors))
    _field(body, "Elapsed", f"{report.elapsed_seconds * 1000:.1f} ms")

    if report.mode == LazyMode.SINGLE_THREAD:
        body.append("  Single-thread lazy values are not safe for concurrent use.\n", style=_LABEL_STYLE)

    if race_verdict(report):
        body.append("\n  supplier ran once, all threads agree", style=_OK_STYLE)
    else:
        body.append("\n  supplier ran more than once or threads disagree", style=_FAIL_STYLE)

    console.print(Panel(body, title="Lazy race", expand=False))


def render_retry_attempts(console: Console, attempts: Sequence[RetryAttempt]) -> None:
    body = Text()
    for outcome in attempts:
        body.append(f"  attempt {outcome.attempt}: ", style=_LABEL_STYLE)
        if outcome.ok:
            body.append(f"ok -> {outcome.value!r}\n", style=_OK_STYLE)
        else:
            body.append(f"failed -> {outcome.error}\n", style=_FAIL_STYLE)
    console.print(Panel(body, title="Lazy retry", expand=False))
