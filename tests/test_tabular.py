"""Tests for CSV table reading."""

from __future__ import annotations

import csv

import pytest

from trial_curves.core.errors import InvalidConfiguration, TableReadError
from trial_curves.io import Table, read_table, read_table_header


def _write_csv(path, rows: list[list[str]]) -> None:
    """Write raw CSV rows to ``path``."""

    with path.open("w", encoding="utf-8", newline="") as handle:
        csv.writer(handle).writerows(rows)


def test_read_table_header_returns_column_names(tmp_path) -> None:
    """Header reader should return names in file order."""

    path = tmp_path / "table.csv"
    _write_csv(path, [["id", "baseline", "drug"], ["1", "{}", "{}"]])

    assert read_table_header(path) == ["id", "baseline", "drug"]


def test_read_table_keeps_rows_in_order_and_quoted_json(tmp_path) -> None:
    """Reader should keep row order and unquote JSON cells."""

    path = tmp_path / "table.csv"
    _write_csv(path, [["id", "cell"], ["a", '{"x": [1, 2]}'], ["b", "plain"]])

    table = read_table(path)

    assert table.header == ("id", "cell")
    assert table.n_rows == 2
    assert table.rows[0].row_index == 0
    assert table.rows[0].cell(1) == '{"x": [1, 2]}'
    assert table.rows[1].cells == ("b", "plain")


def test_read_table_skips_blank_lines(tmp_path) -> None:
    """Blank lines should not become rows."""

    path = tmp_path / "table.csv"
    path.write_text("id,cell\na,1\n\nb,2\n", encoding="utf-8")

    table = read_table(path)

    assert [row.cells for row in table.rows] == [("a", "1"), ("b", "2")]
    assert [row.row_index for row in table.rows] == [0, 1]


def test_read_table_rejects_rows_with_wrong_width(tmp_path) -> None:
    """A row whose width differs from the header is a table-level error."""

    path = tmp_path / "table.csv"
    path.write_text("id,cell\na,1\nb\n", encoding="utf-8")

    with pytest.raises(TableReadError, match="row 1 has 1 field"):
        read_table(path)


def test_read_table_rejects_missing_file_and_missing_header(tmp_path) -> None:
    """Unreadable or empty sources should raise TableReadError."""

    with pytest.raises(TableReadError, match="cannot read table"):
        read_table(tmp_path / "missing.csv")
    with pytest.raises(TableReadError, match="cannot read table"):
        read_table_header(tmp_path / "missing.csv")

    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(TableReadError, match="header row"):
        read_table(empty)
    with pytest.raises(TableReadError, match="header row"):
        read_table_header(empty)


def test_table_row_cell_reports_out_of_range_column() -> None:
    """Addressing a column beyond the row width is a configuration error."""

    table = Table.from_records(["a", "b"], [["1", "2"]])

    with pytest.raises(InvalidConfiguration, match="column id 5"):
        table.rows[0].cell(5)
