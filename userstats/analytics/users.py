"""
User analytics — age filters, country/region counts, average age, oldest users.

Every function is a pure function of the record sequence: the frame it works
on is built per call and the input records are never modified.
"""
from __future__ import annotations

from typing import Sequence

from userstats.analytics.common import pick_records, safe_mean, sorted_counts, users_frame
from userstats.config import (
    DEFAULT_MIN_AGE,
    DEFAULT_TOP_N,
    INVALID_AGE_RANK,
    OTHER_REGION,
    REGION_BY_COUNTRY,
)
from userstats.data.schemas import UserRecord


def filter_by_min_age(
    records: Sequence[UserRecord],
    threshold: int = DEFAULT_MIN_AGE,
) -> list[UserRecord]:
    """Records whose age parses as a whole number >= threshold, in input order."""
    df = users_frame(records)
    # NaN ages compare False, so unparseable rows drop out here
    keep = df["age_value"] >= threshold
    return pick_records(records, df.index[keep.to_numpy()])


def count_by_country(records: Sequence[UserRecord]) -> dict[str, int]:
    """Users per exact country string (including ""), sorted by country.

    Keys are in ordinal (code point) order, so "B" sorts before "a"; this is
    not a culture-aware, case-folding sort.
    """
    df = users_frame(records)
    return sorted_counts(df["country"])


def average_age(records: Sequence[UserRecord]) -> float:
    """Mean of the parseable ages rounded to one decimal; 0.0 if there are none."""
    df = users_frame(records)
    mean = safe_mean(df["age_value"], default=0.0)
    return round(mean * 10) / 10


def top_n_oldest(
    records: Sequence[UserRecord],
    n: int = DEFAULT_TOP_N,
) -> list[UserRecord]:
    """The n oldest users, oldest first.

    Unparseable ages rank as -1 so they sort after every valid age without
    being dropped. Equal ages keep their input order.
    """
    if n <= 0:
        return []
    df = users_frame(records)
    rank = df["age_value"].fillna(INVALID_AGE_RANK)
    ordered = rank.sort_values(ascending=False, kind="stable")
    return pick_records(records, ordered.index[:n])


def region_for(country: str) -> str:
    """Map a country name to its region, or "Other" when it isn't in the table."""
    return REGION_BY_COUNTRY.get(country, OTHER_REGION)


def users_by_region(records: Sequence[UserRecord]) -> dict[str, int]:
    """Users per region, sorted by region name."""
    df = users_frame(records)
    return sorted_counts(df["country"].map(region_for))
