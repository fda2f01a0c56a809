"""Main entry point for lazyval."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TypeVar

from rich.console import Console

from lazyval.config import Config
from lazyval.logging_config import configure_logging
from lazyval.race import CountingSupplier, run_race, run_retry
from lazyval.ui.report import race_verdict, render_race_report, render_retry_attempts

T = TypeVar("T")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lazyval")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML config file.")
    parser.add_argument("--debug", action="store_true", help="Also log to stderr.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    race = subparsers.add_parser("race", help="Race threads against one lazy value.")
    race.add_argument("--threads", type=int, default=None)
    race.add_argument("--delay-ms", type=int, default=None)
    race.add_argument("--value", type=int, default=None)
    race.add_argument("--mode", default=None, help="single_thread or multi_thread.")

    retry = subparsers.add_parser("retry", help="Show retry after a failed supplier call.")
    retry.add_argument("--failures", type=int, default=None)
    retry.add_argument("--attempts", type=int, default=None)
    retry.add_argument("--value", type=int, default=None)
    retry.add_argument("--mode", default=None, help="single_thread or multi_thread.")
    return parser


def _pick(value: Optional[T], default: T) -> T:
    return default if value is None else value


def _run_race(args: argparse.Namespace, config: Config, console: Console) -> int:
    settings = config.race
    supplier = CountingSupplier(
        _pick(args.value, settings.race_value),
        delay_seconds=_pick(args.delay_ms, settings.race_delay_ms) / 1000.0,
    )
    report = run_race(
        supplier,
        threads=_pick(args.threads, settings.race_threads),
        mode=_pick(args.mode, settings.race_mode),
    )
    render_race_report(console, report)
    return 0 if race_verdict(report) else 1


def _run_retry(args: argparse.Namespace, config: Config, console: Console) -> int:
    settings = config.race
    supplier = CountingSupplier(
        _pick(args.value, settings.race_value),
        failures=_pick(args.failures, settings.retry_failures),
    )
    attempts = run_retry(
        supplier,
        attempts=_pick(args.attempts, settings.retry_attempts),
        mode=_pick(args.mode, settings.race_mode),
    )
    render_retry_attempts(console, attempts)
    return 0 if attempts[-1].ok else 1


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    config = Config(config_path=args.config)
    if args.debug:
        config.developer.debug_mode = True
    configure_logging(config)

    console = Console()
    try:
        if args.command == "race":
            exit_code = _run_race(args, config, console)
        else:
            exit_code = _run_retry(args, config, console)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        raise SystemExit(130)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2)

    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
