from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING
from uuid import UUID

from dotenv import load_dotenv

from relcount.app import read_execution_counts
from relcount.config import ConfigurationError, configure_logging, get_counting_policy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect relationship counters")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("policy", help="Show the effective global counting flags")

    counts = subparsers.add_parser("counts", help="Show the counters of one execution")
    counts.add_argument("execution_id", type=str, help="Execution id (UUID)")

    return parser.parse_args(list(argv))


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as exc:
        raise ValueError(f"Invalid UUID: {value}") from exc


def _show_policy() -> None:
    policy = get_counting_policy()
    log.info("execution relationship counts: %s", policy.execution_counting_enabled)
    log.info("task relationship counts: %s", policy.task_counting_enabled)


def _show_counts(execution_id: UUID) -> bool:
    report = read_execution_counts(execution_id)
    if report is None:
        log.error("Execution %s not found", execution_id)
        return False
    if not report.trusted:
        log.warning("Counting disabled for %s; values below are not reliable", execution_id)
    for counter, value in report.counts.items():
        log.info("%s: %s", counter.value, value)
    return True


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    execution_id: UUID | None = None
    try:
        parsed_args = _parse_args(argv if argv is not None else sys.argv[1:])
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        if parsed_args.command == "counts":
            execution_id = _parse_uuid(parsed_args.execution_id)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "policy":
            _show_policy()
        elif parsed_args.command == "counts" and execution_id is not None:
            if not _show_counts(execution_id):
                sys.exit(1)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(1)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
