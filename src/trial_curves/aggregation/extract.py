"""Per-curve sample extraction from table rows."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from trial_curves.core.data import CurveConfig, Sample
from trial_curves.core.errors import DecodeError, InvalidConfiguration
from trial_curves.io.records import decode_sample
from trial_curves.io.tabular import TableRow
from trial_curves.utils.logging import get_logger

logger = get_logger(__name__)


def extract_curve_samples(
    rows: Iterable[TableRow],
    curves: Sequence[CurveConfig],
) -> list[list[Sample]]:
    """Decode every curve's column across all rows.

    Each (row, curve) cell is decoded independently: a cell that fails to
    decode drops that row from that curve only.

    Parameters
    ----------
    rows : Iterable[TableRow]
        Data rows in table order.
    curves : Sequence[CurveConfig]
        Requested curves.

    Returns
    -------
    list[list[Sample]]
        One sample list per curve, index-aligned with ``curves``, each in row
        order.

    Raises
    ------
    InvalidConfiguration
        If no curve is requested or a configured column is absent from a row.
    """

    if not curves:
        raise InvalidConfiguration("no curve is requested")

    samples: list[list[Sample]] = [[] for _ in curves]
    skipped = [0] * len(curves)
    for row in rows:
        for curve_index, curve in enumerate(curves):
            text = row.cell(curve.column_id)
            try:
                sample = decode_sample(text)
            except DecodeError as exc:
                skipped[curve_index] += 1
                logger.debug(
                    "row %d, column %d skipped for curve %d: %s",
                    row.row_index,
                    curve.column_id,
                    curve_index,
                    exc,
                )
                continue
            samples[curve_index].append(sample)

    for curve_index, curve in enumerate(curves):
        logger.info(
            "curve %d (column %d): %d valid sample(s), %d skipped",
            curve_index,
            curve.column_id,
            len(samples[curve_index]),
            skipped[curve_index],
        )
    return samples


__all__ = ["extract_curve_samples"]
