"""Shared pytest fixtures for userstats tests."""

import pytest

from userstats.data.schemas import UserRecord


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV under tmp_path and return its path."""
    def _write(text: str, name: str = "users.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def users_csv(write_csv):
    return write_csv(
        "name,age,country\n"
        "Aino,34,Finland\n"
        "Bob,29,USA\n"
        "Chen,n/a,Japan\n"
        "Dana,51,USA\n"
        "Eve,30,Mars\n"
        "Femi,45,\n"
    )


@pytest.fixture
def users():
    return [
        UserRecord("Aino", "34", "Finland"),
        UserRecord("Bob", "29", "USA"),
        UserRecord("Chen", "n/a", "Japan"),
        UserRecord("Dana", "51", "USA"),
        UserRecord("Eve", "30", "Mars"),
        UserRecord("Femi", "45", ""),
    ]
