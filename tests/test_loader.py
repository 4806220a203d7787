"""Tests for CSV loading and header resolution."""

from userstats.data.loader import load_users
from userstats.data.normalize import resolve_columns, split_fields
from userstats.data.schemas import ColumnIndex, UserRecord


class TestResolveColumns:

    def test_standard_header(self):
        assert resolve_columns("name,age,country") == ColumnIndex(name=0, age=1, country=2)

    def test_case_insensitive_and_trimmed(self):
        assert resolve_columns(" NAME , Age,COUNTRY ") == ColumnIndex(name=0, age=1, country=2)

    def test_missing_column_is_none_not_zero(self):
        cols = resolve_columns("name,country")
        assert cols.age is None
        assert cols.name == 0
        assert cols.missing == ["age"]

    def test_first_matching_column_wins(self):
        assert resolve_columns("age,name,Age,country").age == 0

    def test_extra_columns_ignored(self):
        assert resolve_columns("id,email,country,name,age") == ColumnIndex(name=3, age=4, country=2)


def test_split_fields_plain_split_no_quoting():
    assert split_fields(' "Smith, J" , 40') == ['"Smith', 'J"', "40"]


class TestLoadUsers:

    def test_loads_records_in_order(self, users_csv, users):
        assert load_users(users_csv) == users

    def test_reordered_header(self, write_csv):
        path = write_csv("Country,Name,Age\nPeru,Ana,22\n")
        assert load_users(path) == [UserRecord(name="Ana", age="22", country="Peru")]

    def test_missing_file_returns_empty_and_reports(self, tmp_path, capsys):
        path = tmp_path / "nope.csv"
        assert load_users(path) == []
        err = capsys.readouterr().err
        assert "Could not read CSV at" in err
        assert str(path.resolve()) in err

    def test_directory_is_treated_as_missing(self, tmp_path):
        assert load_users(tmp_path) == []

    def test_empty_file(self, write_csv):
        assert load_users(write_csv("")) == []

    def test_header_only(self, write_csv):
        assert load_users(write_csv("name,age,country\n")) == []

    def test_blank_lines_skipped(self, write_csv):
        path = write_csv("name,age,country\n\n   \nAna,22,Peru\n\t\n")
        assert load_users(path) == [UserRecord("Ana", "22", "Peru")]

    def test_short_line_fills_empty_strings(self, write_csv):
        path = write_csv("name,age,country\nAna\n")
        assert load_users(path) == [UserRecord("Ana", "", "")]

    def test_long_line_ignores_extra_fields(self, write_csv):
        path = write_csv("name,age,country\nAna,22,Peru,extra,more\n")
        assert load_users(path) == [UserRecord("Ana", "22", "Peru")]

    def test_absent_column_always_empty(self, write_csv):
        path = write_csv("name,country\nAna,Peru\n")
        assert load_users(path) == [UserRecord("Ana", "", "Peru")]

    def test_fields_trimmed_age_not_validated(self, write_csv):
        path = write_csv("name,age,country\n  Ana  , forty ,  Peru \n")
        assert load_users(path) == [UserRecord("Ana", "forty", "Peru")]

    def test_crlf_and_bom(self, tmp_path):
        path = tmp_path / "win.csv"
        path.write_bytes("\ufeffName,Age,Country\r\nAna,22,Peru\r\n".encode("utf-8"))
        assert load_users(path) == [UserRecord("Ana", "22", "Peru")]

    def test_non_utf8_bytes_replaced(self, tmp_path):
        path = tmp_path / "cp1252.csv"
        path.write_bytes(b"name,age,country\nJos\xe9,40,Spain\n")
        assert load_users(path) == [UserRecord("Jos\ufffd", "40", "Spain")]

    def test_accepts_str_path(self, users_csv):
        assert len(load_users(str(users_csv))) == 6
