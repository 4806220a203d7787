"""
UserStore — In-memory, read-only user records with a cached pandas view.

Loaded once per run, queried by every report.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from userstats.config import CSV_PATH
from userstats.data.loader import load_users
from userstats.data.schemas import UserRecord


class UserStore:
    """Loaded user records plus accessors used by the reports."""

    def __init__(self, records: tuple[UserRecord, ...] = ()) -> None:
        self._records: tuple[UserRecord, ...] = tuple(records)
        self._frame: Optional[pd.DataFrame] = None
        self.source: Optional[Path] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, filepath: Path | str = CSV_PATH) -> "UserStore":
        """Load records from a CSV; a missing or empty file leaves the store empty."""
        self.source = Path(filepath)
        self._records = tuple(load_users(self.source))
        self._frame = None
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def records(self) -> tuple[UserRecord, ...]:
        return self._records

    @property
    def is_empty(self) -> bool:
        return not self._records

    def row_count(self) -> int:
        return len(self._records)

    @property
    def frame(self) -> pd.DataFrame:
        """Records as a DataFrame with a parsed ``age_value`` column (built once).

        Returns a copy so callers can't disturb the cached view.
        """
        if self._frame is None:
            from userstats.analytics.common import users_frame
            self._frame = users_frame(self._records)
        return self._frame.copy()

    def invalid_age_count(self) -> int:
        """Records whose age doesn't parse as a whole number."""
        if self.is_empty:
            return 0
        return int(self.frame["age_value"].isna().sum())


def load_store(filepath: Path | str = CSV_PATH) -> UserStore:
    return UserStore().load(filepath)
