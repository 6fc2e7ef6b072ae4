"""Core data model, error taxonomy and config helpers."""

from .config_loading import SUPPORTED_CONFIG_SUFFIXES, load_config_mapping
from .data import (
    SHORT_SAMPLE_POLICIES,
    AggregationRun,
    BinStat,
    CurveConfig,
    Sample,
    ShortSamplePolicy,
)
from .errors import (
    DecodeError,
    EncodingError,
    FileWriteError,
    InvalidConfiguration,
    TableReadError,
    TrialCurvesError,
    error_payload,
)

__all__ = [
    "AggregationRun",
    "BinStat",
    "CurveConfig",
    "DecodeError",
    "EncodingError",
    "FileWriteError",
    "InvalidConfiguration",
    "SHORT_SAMPLE_POLICIES",
    "SUPPORTED_CONFIG_SUFFIXES",
    "Sample",
    "ShortSamplePolicy",
    "TableReadError",
    "TrialCurvesError",
    "error_payload",
    "load_config_mapping",
]
