"""Tests for core data containers, error payloads and logging setup."""

from __future__ import annotations

import logging

import pytest

from trial_curves.aggregation import aggregate_run
from trial_curves.core import (
    AggregationRun,
    BinStat,
    CurveConfig,
    DecodeError,
    EncodingError,
    FileWriteError,
    InvalidConfiguration,
    Sample,
    TableReadError,
    error_payload,
)
from trial_curves.utils.logging import LOGGER_NAME, configure_logging, get_logger


def test_sample_truncated_returns_prefix_without_mutation() -> None:
    """Truncation should keep the first steps and leave the sample intact."""

    sample = Sample(presses=(1, 2, 3, 4), sum_presses=10)

    short = sample.truncated(2)

    assert short.presses == (1, 2)
    assert short.sum_presses == 10
    assert sample.presses == (1, 2, 3, 4)
    assert sample.truncated(10) is sample


def test_bin_stat_band_and_boundary_dict() -> None:
    """BinStat should expose the ± band and camelCase boundary keys."""

    stat = BinStat(average=5.0, standard_error=1.5, n_steps=2)

    assert stat.lower == 3.5
    assert stat.upper == 6.5
    assert stat.to_dict() == {"average": 5.0, "standardError": 1.5}


def test_aggregation_run_feeds_aggregator() -> None:
    """An AggregationRun should carry its curve index into error messages."""

    run = AggregationRun(curve_index=4, curve=CurveConfig(column_id=2), samples=(Sample(presses=(1,)),))

    assert run.n_samples == 1
    with pytest.raises(InvalidConfiguration, match=r"curve 4 \(column 2\)"):
        aggregate_run(run)


@pytest.mark.parametrize(
    ("error", "kind", "base"),
    [
        (TableReadError("unreadable"), "table_read", OSError),
        (DecodeError("bad cell"), "decode", ValueError),
        (InvalidConfiguration("no curve is requested"), "invalid_configuration", ValueError),
        (EncodingError("invalid image"), "encoding", ValueError),
        (FileWriteError("disk full"), "io", OSError),
    ],
)
def test_error_payload_tags_each_kind(error, kind: str, base: type) -> None:
    """Every library error maps to its kind and keeps its message."""

    assert isinstance(error, base)
    assert error_payload(error) == {"kind": kind, "message": str(error)}


def test_error_payload_marks_unexpected_errors_internal() -> None:
    """Non-library errors are reported as internal."""

    assert error_payload(KeyError("x")) == {"kind": "internal", "message": "KeyError: 'x'"}


def test_configure_logging_attaches_single_stderr_handler() -> None:
    """configure_logging should configure only the package logger, once."""

    logger = logging.getLogger(LOGGER_NAME)

    configure_logging("DEBUG", force=True)
    configure_logging("WARNING")

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.WARNING
    assert get_logger("trial_curves.io").parent is logger
    assert get_logger() is logger
