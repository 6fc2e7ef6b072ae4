"""Curve extraction, binning and concurrent aggregation."""

from .binning import aggregate_curve, aggregate_run, bin_presses, n_bins, time_span
from .config import (
    curve_config_from_mapping,
    curve_configs_from_mapping,
    curve_configs_from_sequence,
    load_curve_configs,
    parse_curve_spec,
)
from .coordinator import aggregate, aggregate_curves, aggregate_table
from .extract import extract_curve_samples
from .serialization import (
    curve_stat_records,
    curve_stats_payload,
    write_curve_stats_csv,
    write_curve_stats_json,
)

__all__ = [
    "aggregate",
    "aggregate_curve",
    "aggregate_curves",
    "aggregate_run",
    "aggregate_table",
    "bin_presses",
    "curve_config_from_mapping",
    "curve_configs_from_mapping",
    "curve_configs_from_sequence",
    "curve_stat_records",
    "curve_stats_payload",
    "extract_curve_samples",
    "load_curve_configs",
    "n_bins",
    "parse_curve_spec",
    "time_span",
    "write_curve_stats_csv",
    "write_curve_stats_json",
]
