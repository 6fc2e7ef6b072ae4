"""Top-level package for ``trial_curves``.

Turns a CSV table with one trial per row, whose cells hold JSON-encoded press
series, into binned mean/standard-error curves:

1. :func:`~trial_curves.io.tabular.read_table` loads the table,
2. :func:`~trial_curves.aggregation.extract.extract_curve_samples` decodes each
   curve's column, skipping undecodable cells per curve,
3. :func:`~trial_curves.aggregation.coordinator.aggregate` bins and summarizes
   every curve concurrently.

The command boundary used by the plotting front end lives in
:mod:`trial_curves.commands`.
"""

from .aggregation import aggregate, aggregate_curve, aggregate_curves, aggregate_table, extract_curve_samples
from .core import (
    BinStat,
    CurveConfig,
    DecodeError,
    EncodingError,
    FileWriteError,
    InvalidConfiguration,
    Sample,
    TableReadError,
    TrialCurvesError,
)
from .io import Table, decode_sample, read_table, read_table_header, save_image

__all__ = [
    "BinStat",
    "CurveConfig",
    "DecodeError",
    "EncodingError",
    "FileWriteError",
    "InvalidConfiguration",
    "Sample",
    "Table",
    "TableReadError",
    "TrialCurvesError",
    "aggregate",
    "aggregate_curve",
    "aggregate_curves",
    "aggregate_table",
    "decode_sample",
    "extract_curve_samples",
    "read_table",
    "read_table_header",
    "save_image",
]
