"""
Text reports — line-oriented renderings of the user analytics, one per operation.
"""
from __future__ import annotations

from typing import Mapping, Sequence

from userstats.analytics.users import (
    average_age,
    count_by_country,
    filter_by_min_age,
    top_n_oldest,
    users_by_region,
)
from userstats.config import DEFAULT_MIN_AGE, DEFAULT_TOP_N
from userstats.data.schemas import UserRecord


def key_value_lines(counts: Mapping[str, int]) -> list[str]:
    return [f"  {key}: {value}" for key, value in counts.items()]


def user_line(user: UserRecord) -> str:
    return f"{user.name} ({user.age})"


def filter_report(users: Sequence[UserRecord], min_age: int = DEFAULT_MIN_AGE) -> list[str]:
    return [f"Filtered count: {len(filter_by_min_age(users, min_age))}"]


def group_report(users: Sequence[UserRecord]) -> list[str]:
    return ["Users per country:"] + key_value_lines(count_by_country(users))


def avg_report(users: Sequence[UserRecord]) -> list[str]:
    return [f"Average age: {average_age(users)}"]


def top_report(users: Sequence[UserRecord], n: int = DEFAULT_TOP_N) -> list[str]:
    return [user_line(u) for u in top_n_oldest(users, n)]


def region_report(users: Sequence[UserRecord]) -> list[str]:
    return ["Users per region:"] + key_value_lines(users_by_region(users))


def summary_report(
    users: Sequence[UserRecord],
    min_age: int = DEFAULT_MIN_AGE,
    n: int = DEFAULT_TOP_N,
) -> list[str]:
    """Every report in one listing; the oldest users are indented here."""
    lines = [f"Total users: {len(users)}"]
    lines += filter_report(users, min_age)
    lines += group_report(users)
    lines += avg_report(users)
    lines.append(f"Top {n} oldest users:")
    lines += [f"  {line}" for line in top_report(users, n)]
    lines += region_report(users)
    return lines
