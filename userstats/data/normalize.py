"""
Header resolution, field splitting, and age parsing.
"""
from __future__ import annotations

import re
from typing import Optional

import pandas as pd

from userstats.config import AGE_COLUMN, AGE_MAX, AGE_MIN, COUNTRY_COLUMN, DELIMITER, NAME_COLUMN
from userstats.data.schemas import ColumnIndex


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------

def split_fields(line: str, delimiter: str = DELIMITER) -> list[str]:
    """Plain split on the delimiter (no quoting), each field trimmed."""
    return [field.strip() for field in line.split(delimiter)]


# ---------------------------------------------------------------------------
# Header resolution
# ---------------------------------------------------------------------------

def _find_column(header: list[str], wanted: str) -> Optional[int]:
    wanted = wanted.lower()
    for pos, field in enumerate(header):
        if field.lower() == wanted:
            return pos
    return None


def resolve_columns(header_line: str, delimiter: str = DELIMITER) -> ColumnIndex:
    """Locate the name/age/country columns in a header line.

    Matching is case-insensitive and the first matching column wins.
    Unrecognised columns are ignored.
    """
    header = split_fields(header_line, delimiter)
    return ColumnIndex(
        name=_find_column(header, NAME_COLUMN),
        age=_find_column(header, AGE_COLUMN),
        country=_find_column(header, COUNTRY_COLUMN),
    )


# ---------------------------------------------------------------------------
# Age parsing
# ---------------------------------------------------------------------------

_AGE_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_age(text: str) -> Optional[int]:
    """Parse an age field as a whole number, or None if it isn't one.

    Accepts surrounding whitespace and a leading sign; rejects decimals,
    non-ASCII digits, and values outside the signed 32-bit range.
    """
    if not isinstance(text, str) or not _AGE_RE.fullmatch(text):
        return None
    value = int(text)
    if value < AGE_MIN or value > AGE_MAX:
        return None
    return value


def parse_ages(ages: pd.Series) -> pd.Series:
    """Vectorised parse_age: float ages with NaN where the text doesn't parse."""
    return ages.map(parse_age).astype("float64")
