"""
Frame construction and counting helpers used across analytics modules.
"""
from __future__ import annotations

from dataclasses import astuple
from typing import Sequence

import pandas as pd

from userstats.data.normalize import parse_ages
from userstats.data.schemas import UserRecord

USER_COLUMNS = ["name", "age", "country"]


def users_frame(records: Sequence[UserRecord]) -> pd.DataFrame:
    """Build a fresh DataFrame of records plus a parsed ``age_value`` column.

    Row labels are the positions of the records in the input sequence, so
    results can be mapped back to the original record objects.
    """
    df = pd.DataFrame([astuple(r) for r in records], columns=USER_COLUMNS, dtype=object)
    df["age_value"] = parse_ages(df["age"])
    return df


def pick_records(records: Sequence[UserRecord], index: pd.Index) -> list[UserRecord]:
    """Return the original record objects at the given row labels, in order."""
    return [records[i] for i in index]


def sorted_counts(keys: pd.Series) -> dict[str, int]:
    """Group size per key, keys in ascending order, as plain Python types."""
    if keys.empty:
        return {}
    counts = keys.groupby(keys, sort=True).size()
    return {str(k): int(v) for k, v in counts.items()}


def safe_mean(values: pd.Series, default: float = 0.0) -> float:
    """Mean of the non-NaN values, or default when there are none."""
    values = values.dropna()
    if values.empty:
        return default
    return float(values.mean())
