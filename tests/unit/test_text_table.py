"""Tests for plain text tables."""

from listview.text_table import TextTable


class TestTextTable:
    """Tests for TextTable."""

    def test_render(self) -> None:
        table = TextTable().render(["Id", "Title"], [["name", "Name"], ["email", "E-mail"]])
        assert table.splitlines() == [
            "+-------+--------+",
            "| Id    | Title  |",
            "+-------+--------+",
            "| name  | Name   |",
            "| email | E-mail |",
            "+-------+--------+",
        ]

    def test_no_headers(self) -> None:
        assert TextTable().render([], [["a"]]) == ""

    def test_no_rows(self) -> None:
        assert TextTable().render(["Id"], []).splitlines() == [
            "+----+",
            "| Id |",
            "+----+",
            "+----+",
        ]

    def test_short_and_long_rows(self) -> None:
        """Missing cells are empty, extra cells are dropped."""
        table = TextTable().render(["A", "B"], [["1"], ["2", "3", "4"]])
        assert table.splitlines()[3:5] == ["| 1 |   |", "| 2 | 3 |"]

    def test_values_converted_to_strings(self) -> None:
        table = TextTable().render(["N"], [[12]])
        assert "| 12 |" in table
