"""
User CSV loading — header resolution and per-line record parsing.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from userstats.config import CSV_PATH, DELIMITER
from userstats.data.normalize import resolve_columns, split_fields
from userstats.data.schemas import UserRecord

logger = logging.getLogger(__name__)


def read_lines(filepath: Path) -> list[str]:
    """Read a text file into lines, accepting \\n, \\r\\n and \\r endings.

    A leading UTF-8 byte-order mark is dropped and bytes that aren't valid
    UTF-8 become U+FFFD. An empty file has no lines.
    """
    with open(filepath, encoding="utf-8-sig", errors="replace", newline=None) as fh:
        return [line.rstrip("\n") for line in fh]


def load_users(
    filepath: Path | str = CSV_PATH,
    delimiter: str = DELIMITER,
) -> list[UserRecord]:
    """Load user records from a delimited file with a header row.

    A missing file is reported on stderr and yields an empty list, the same
    as an empty file. Lines that are blank are skipped; every other line
    produces a record, with "" for any field the line is too short to reach.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        print(f"Could not read CSV at {filepath.resolve()}", file=sys.stderr)
        return []

    lines = read_lines(filepath)
    if not lines:
        return []

    columns = resolve_columns(lines[0], delimiter)
    if columns.missing:
        logger.warning("%s: header has no %s column(s)", filepath.name, ", ".join(columns.missing))

    users: list[UserRecord] = []
    skipped = 0
    for line in lines[1:]:
        if not line.strip():
            skipped += 1
            continue
        users.append(columns.pick(split_fields(line, delimiter)))

    logger.info("Loaded %s: %d records (%d blank lines skipped)", filepath.name, len(users), skipped)
    return users
