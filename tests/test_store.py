"""Tests for the in-memory UserStore."""

from userstats.data.schemas import UserRecord
from userstats.data.store import UserStore, load_store


def test_load_populates_records(users_csv, users):
    store = load_store(users_csv)
    assert store.records == tuple(users)
    assert store.row_count() == 6
    assert not store.is_empty
    assert store.source == users_csv


def test_missing_file_leaves_store_empty(tmp_path):
    store = UserStore().load(tmp_path / "missing.csv")
    assert store.is_empty
    assert store.row_count() == 0
    assert store.invalid_age_count() == 0


def test_frame_has_parsed_ages(users_csv):
    df = load_store(users_csv).frame
    assert list(df.columns) == ["name", "age", "country", "age_value"]
    assert df["age_value"].isna().tolist() == [False, False, True, False, False, False]
    assert df.loc[0, "age_value"] == 34


def test_frame_is_a_copy(users_csv):
    store = load_store(users_csv)
    df = store.frame
    df.loc[0, "name"] = "changed"
    assert store.frame.loc[0, "name"] == "Aino"


def test_invalid_age_count():
    store = UserStore((UserRecord("a", "x", ""), UserRecord("b", "3", ""), UserRecord("c", "", "")))
    assert store.invalid_age_count() == 2


def test_reload_replaces_records(write_csv):
    first = write_csv("name,age,country\nA,1,UK\n", name="a.csv")
    second = write_csv("name,age,country\nB,2,UK\nC,3,UK\n", name="b.csv")
    store = UserStore().load(first)
    assert store.row_count() == 1
    store.load(second)
    assert [r.name for r in store.records] == ["B", "C"]
    assert store.frame["name"].tolist() == ["B", "C"]
