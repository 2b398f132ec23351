"""Entry point for ``python -m ical_events``.

Reads an ``.ics`` file and prints the events it contains, either as a
console report or as JSON lines.  Uses stdlib :mod:`argparse` for argument
parsing (no extra dependencies).

Exit codes:
    0 -- Every component was read successfully (including zero events).
    1 -- The file could not be read, the configuration is invalid, or at
         least one component failed to parse.
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ical_events.config import ConfigError, load_settings
from ical_events.log import get_logger, setup_logging
from ical_events.output import format_json_lines, print_report
from ical_events.reader import read_events_file

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="ical-events",
        description="Extract VEVENT records from an iCalendar (.ics) file.",
    )
    parser.add_argument(
        "calendar_file",
        type=str,
        help="Path to the .ics file.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print one JSON object per event or error instead of a report.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the ical-events CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    # --- Validate calendar file ---------------------------------------
    calendar_path = Path(args.calendar_file)

    if not calendar_path.exists():
        print(f"Error: File not found: {calendar_path}", file=sys.stderr)
        return 1

    if not calendar_path.is_file():
        print(f"Error: Not a file: {calendar_path}", file=sys.stderr)
        return 1

    # --- Read events --------------------------------------------------
    try:
        results = list(read_events_file(calendar_path, encoding=settings.encoding))
    except (FileNotFoundError, PermissionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    failed = sum(1 for result in results if not result.ok)
    logger.info("Read %d component(s) from %s, %d failed", len(results), calendar_path, failed)

    # --- Render output ------------------------------------------------
    if args.json:
        if results:
            sys.stdout.write(format_json_lines(results) + "\n")
    else:
        print_report(results, source=str(calendar_path))

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
