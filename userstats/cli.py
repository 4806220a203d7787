#!/usr/bin/env python3
"""
User Stats CLI — descriptive statistics over a users CSV.

USAGE:
  python -m userstats.cli                        # Full summary (default)
  python -m userstats.cli filter                 # Users aged 30 or over
  python -m userstats.cli filter --min-age 40    # Custom age threshold
  python -m userstats.cli group                  # Users per country
  python -m userstats.cli avg                    # Average age
  python -m userstats.cli top --top 5            # Five oldest users
  python -m userstats.cli region                 # Users per region
  python -m userstats.cli --csv data/users.csv   # Read a different file

EXIT STATUS:
  0 success, 1 no records loaded (missing or empty file), 2 unknown operation
"""
from __future__ import annotations

import argparse
import logging
import sys

from userstats.config import (
    CSV_PATH,
    DEFAULT_MIN_AGE,
    DEFAULT_OPERATION,
    DEFAULT_TOP_N,
    EXIT_NO_DATA,
    EXIT_OK,
    EXIT_UNKNOWN_OPERATION,
    OPERATIONS,
)
from userstats.data.store import UserStore
from userstats.reports.text import (
    avg_report,
    filter_report,
    group_report,
    region_report,
    summary_report,
    top_report,
)

logger = logging.getLogger(__name__)


def cmd_summary(users, args):
    return summary_report(users, args.min_age, args.top)


def cmd_filter(users, args):
    return filter_report(users, args.min_age)


def cmd_group(users, args):
    return group_report(users)


def cmd_avg(users, args):
    return avg_report(users)


def cmd_top(users, args):
    return top_report(users, args.top)


def cmd_region(users, args):
    return region_report(users)


COMMANDS = {
    "summary": cmd_summary,
    "filter": cmd_filter,
    "group": cmd_group,
    "avg": cmd_avg,
    "top": cmd_top,
    "region": cmd_region,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="userstats",
        description="User Stats — counts, averages and rankings over a users CSV",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Not restricted with choices: unknown operations get their own message and exit code
    parser.add_argument(
        "operation", nargs="?", default=DEFAULT_OPERATION,
        help=f"One of {'|'.join(OPERATIONS)} (default: {DEFAULT_OPERATION})",
    )
    parser.add_argument("--csv", default=str(CSV_PATH), help=f"Users CSV (default: {CSV_PATH})")
    parser.add_argument("--min-age", type=int, default=DEFAULT_MIN_AGE,
                        help=f"Age threshold for 'filter' (default {DEFAULT_MIN_AGE})")
    parser.add_argument("--top", type=int, default=DEFAULT_TOP_N,
                        help=f"How many users 'top' lists (default {DEFAULT_TOP_N})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log loader details to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = UserStore().load(args.csv)
    if store.is_empty:
        return EXIT_NO_DATA
    if logger.isEnabledFor(logging.INFO):
        logger.info("%d of %d records have an unparseable age", store.invalid_age_count(), store.row_count())

    command = COMMANDS.get(args.operation)
    if command is None:
        print(f"Unknown operation '{args.operation}'. Use {'|'.join(OPERATIONS)}.")
        return EXIT_UNKNOWN_OPERATION

    for line in command(store.records, args):
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
