"""Command-line entry point to format a date in ISO 9075.

Usage:
    iso9075-format 2019-09-18T19:00:52
    iso9075-format 2019-09-18T19:00:52 --format basic --representation time
    iso9075-format --timestamp-ms 1568833252000

Options:
    DATE                  ISO 8601 date or datetime to format (default: now, local time)
    --timestamp-ms N      Milliseconds since the Unix epoch, instead of DATE
    --format              extended or basic (default: extended)
    --representation      complete, date or time (default: complete)
    -v, --verbose         Enable verbose logging
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import Sequence

from aletk.ResultMonad import Err
from aletk.utils import get_logger

from iso9075_sdk.converters.plaintext.iso9075.formatter import format_iso9075_result
from iso9075_sdk.logic.literals import FORMAT_VALUES, REPRESENTATION_VALUES
from iso9075_sdk.logic.models import TDateLike

lgr = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iso9075-format",
        description="Format a date according to ISO 9075",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "date",
        nargs="?",
        default=None,
        help="ISO 8601 date or datetime to format (default: now, local time)",
    )
    source.add_argument(
        "--timestamp-ms",
        type=int,
        default=None,
        help="Milliseconds since the Unix epoch, instead of DATE",
    )

    parser.add_argument(
        "--format",
        default="extended",
        choices=FORMAT_VALUES,
        help="Delimiter style (default: extended)",
    )
    parser.add_argument(
        "--representation",
        default="complete",
        choices=REPRESENTATION_VALUES,
        help="Parts of the date to render (default: complete)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser


def _read_date(args: argparse.Namespace) -> TDateLike:
    if args.timestamp_ms is not None:
        return args.timestamp_ms

    if args.date is None:
        return datetime.now()

    return datetime.fromisoformat(args.date)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        date = _read_date(args)
    except ValueError as e:
        print(f"Error: Could not read date '{args.date}': {e}", file=sys.stderr)
        return 1

    lgr.debug(f"Formatting {date!r} with format={args.format}, representation={args.representation}")

    result = format_iso9075_result(date, {"format": args.format, "representation": args.representation})

    if isinstance(result, Err):
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    print(result.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
