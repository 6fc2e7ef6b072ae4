"""Tabular CSV reading for trial tables.

The first CSV row is the header; every following row is one trial. Rows are
kept as raw strings and addressed by zero-based column index, so sample
columns are decoded lazily by the column extractor.
"""

from __future__ import annotations

import csv
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from trial_curves.core.errors import InvalidConfiguration, TableReadError
from trial_curves.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TableRow:
    """One data row of a table.

    Parameters
    ----------
    row_index : int
        Zero-based data row index (the header is not counted).
    cells : tuple[str, ...]
        Raw cell texts in column order.
    """

    row_index: int
    cells: tuple[str, ...]

    @property
    def width(self) -> int:
        """Return number of cells in this row."""

        return len(self.cells)

    def cell(self, column_id: int) -> str:
        """Return the raw text of one cell.

        Raises
        ------
        InvalidConfiguration
            If ``column_id`` is outside this row.
        """

        if column_id < 0 or column_id >= len(self.cells):
            raise InvalidConfiguration(
                f"column id {column_id} is out of range for row {self.row_index} "
                f"with {len(self.cells)} column(s)"
            )
        return self.cells[column_id]


@dataclass(frozen=True, slots=True)
class Table:
    """Header plus ordered data rows read from one CSV source."""

    header: tuple[str, ...]
    rows: tuple[TableRow, ...]

    @property
    def n_rows(self) -> int:
        """Return number of data rows."""

        return len(self.rows)

    @classmethod
    def from_records(cls, header: Sequence[str], records: Sequence[Sequence[str]]) -> "Table":
        """Build a table from in-memory header and row sequences."""

        return cls(
            header=tuple(str(name) for name in header),
            rows=tuple(
                TableRow(row_index=index, cells=tuple(str(cell) for cell in record))
                for index, record in enumerate(records)
            ),
        )


def read_table_header(path: str | Path) -> list[str]:
    """Read the header row of a CSV file.

    Parameters
    ----------
    path : str | pathlib.Path
        Input CSV path.

    Returns
    -------
    list[str]
        Column names in file order.

    Raises
    ------
    TableReadError
        If the file cannot be read or has no header row.
    """

    input_path = Path(path)
    try:
        with input_path.open("r", encoding="utf-8", newline="") as handle:
            reader = csv.reader(handle)
            header = next(reader, None)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise TableReadError(f"cannot read table {input_path}: {exc}") from exc
    if header is None:
        raise TableReadError(f"table {input_path} must include a header row")
    return list(header)


def read_table(path: str | Path) -> Table:
    """Read a whole CSV file into a :class:`Table`.

    Parameters
    ----------
    path : str | pathlib.Path
        Input CSV path.

    Returns
    -------
    Table
        Header and data rows in file order.

    Raises
    ------
    TableReadError
        If the file cannot be read, has no header row, contains invalid CSV,
        or a data row's field count differs from the header's.
    """

    input_path = Path(path)
    rows: list[TableRow] = []
    try:
        with input_path.open("r", encoding="utf-8", newline="") as handle:
            reader = csv.reader(handle)
            header = next(reader, None)
            if header is None:
                raise TableReadError(f"table {input_path} must include a header row")
            for record in reader:
                # blank lines carry no trial
                if not record:
                    continue
                if len(record) != len(header):
                    raise TableReadError(
                        f"table {input_path}: row {len(rows)} has {len(record)} field(s), "
                        f"header has {len(header)}"
                    )
                rows.append(TableRow(row_index=len(rows), cells=tuple(record)))
    except TableReadError:
        raise
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise TableReadError(f"cannot read table {input_path}: {exc}") from exc

    logger.debug("read %d row(s) x %d column(s) from %s", len(rows), len(header), input_path)
    return Table(header=tuple(header), rows=tuple(rows))


__all__ = ["Table", "TableRow", "read_table", "read_table_header"]
