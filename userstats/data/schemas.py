"""
Record and header-position schemas for user CSVs.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserRecord:
    """One parsed data row. All fields are kept as raw (trimmed) text."""
    name: str
    age: str
    country: str


@dataclass(frozen=True)
class ColumnIndex:
    """Resolved header positions; None means the column was not in the header."""
    name: Optional[int] = None
    age: Optional[int] = None
    country: Optional[int] = None

    @property
    def missing(self) -> list[str]:
        """Names of recognised columns absent from the header."""
        return [
            field for field, pos in (("name", self.name), ("age", self.age), ("country", self.country))
            if pos is None
        ]

    def pick(self, cols: list[str]) -> UserRecord:
        """Build a record from split fields, substituting "" for unreachable positions."""
        def _col(pos: Optional[int]) -> str:
            if pos is None or pos >= len(cols):
                return ""
            return cols[pos]

        return UserRecord(name=_col(self.name), age=_col(self.age), country=_col(self.country))
