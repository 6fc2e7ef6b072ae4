"""Serialization helpers for aggregated curve statistics."""

from __future__ import annotations

import csv
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from trial_curves.core.data import BinStat, CurveConfig

_RECORD_COLUMNS = (
    "curve_index",
    "column_id",
    "unit",
    "bin_index",
    "bin_start",
    "bin_stop",
    "average",
    "standard_error",
    "lower",
    "upper",
)


def curve_stats_payload(results: Sequence[Sequence[BinStat]]) -> list[list[dict[str, float]]]:
    """Convert results into the nested boundary representation.

    Parameters
    ----------
    results : Sequence[Sequence[BinStat]]
        One statistics sequence per curve.

    Returns
    -------
    list[list[dict[str, float]]]
        ``[[{"average": ..., "standardError": ...}, ...], ...]``.
    """

    return [[stat.to_dict() for stat in curve] for curve in results]


def curve_stat_records(
    results: Sequence[Sequence[BinStat]],
    curves: Sequence[CurveConfig],
) -> list[dict[str, Any]]:
    """Flatten results into one row per (curve, bin).

    Parameters
    ----------
    results : Sequence[Sequence[BinStat]]
        One statistics sequence per curve.
    curves : Sequence[CurveConfig]
        Curves the results were computed for, in the same order.

    Returns
    -------
    list[dict[str, Any]]
        Flat records including the ``average ± standard_error`` band and the
        half-open step range ``[bin_start, bin_stop)`` each bin covers; a
        partial last bin stops at the time span.
    """

    if len(results) != len(curves):
        raise ValueError("results and curves must have the same length")

    rows: list[dict[str, Any]] = []
    for curve_index, (stats, curve) in enumerate(zip(results, curves)):
        for bin_index, stat in enumerate(stats):
            rows.append({
                "curve_index": curve_index,
                "column_id": int(curve.column_id),
                "unit": int(curve.unit),
                "bin_index": bin_index,
                "bin_start": bin_index * curve.unit,
                "bin_stop": bin_index * curve.unit + stat.n_steps,
                "average": float(stat.average),
                "standard_error": float(stat.standard_error),
                "lower": float(stat.lower),
                "upper": float(stat.upper),
            })
    return rows


def write_curve_stats_csv(
    results: Sequence[Sequence[BinStat]],
    curves: Sequence[CurveConfig],
    path: str | Path,
) -> Path:
    """Write flat curve records to a CSV file.

    Raises
    ------
    ValueError
        If there is nothing to write.
    """

    rows = curve_stat_records(results, curves)
    if not rows:
        raise ValueError("results must include at least one bin")

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(_RECORD_COLUMNS))
        writer.writeheader()
        writer.writerows(rows)
    return output_path


def write_curve_stats_json(
    results: Sequence[Sequence[BinStat]],
    curves: Sequence[CurveConfig],
    path: str | Path,
) -> Path:
    """Write the nested payload plus the curve configs to a JSON file."""

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    document = {
        "curves": [
            {
                "column_id": int(curve.column_id),
                "unit": int(curve.unit),
                "max_length": int(curve.max_length),
                "short_samples": str(curve.short_samples),
            }
            for curve in curves
        ],
        "stats": curve_stats_payload(results),
    }
    output_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
    return output_path


__all__ = [
    "curve_stat_records",
    "curve_stats_payload",
    "write_curve_stats_csv",
    "write_curve_stats_json",
]
