"""Per-bin mean and standard error for one curve.

For ``n`` samples binned into ``b[s][i]`` (sum of the steps of sample ``s``
that fall into bin ``i``)::

    average[i]        = sum_s b[s][i] / n
    variance[i]       = sum_s (b[s][i] - average[i]) ** 2 / (n - 1)
    standard_error[i] = sqrt(variance[i] / n)

The variance pass runs over the finalized mean.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from trial_curves.core.data import AggregationRun, BinStat, CurveConfig, Sample
from trial_curves.core.errors import InvalidConfiguration
from trial_curves.utils.logging import get_logger

logger = get_logger(__name__)


def time_span(first: Sample, curve: CurveConfig) -> int:
    """Return the number of time steps a curve considers.

    Parameters
    ----------
    first : Sample
        First valid sample of the curve.
    curve : CurveConfig
        Curve configuration.

    Returns
    -------
    int
        ``len(first.presses)`` when ``max_length`` is ``0``, otherwise the
        smaller of ``max_length`` and that length.
    """

    if curve.max_length == 0:
        return first.n_steps
    return min(curve.max_length, first.n_steps)


def n_bins(seconds: int, unit: int) -> int:
    """Return ``ceil(seconds / unit)``."""

    return -(-seconds // unit)


def bin_presses(presses: Sequence[int], *, seconds: int, unit: int) -> np.ndarray:
    """Sum the first ``seconds`` presses into bins of ``unit`` steps.

    Parameters
    ----------
    presses : Sequence[int]
        Per-step counts of one sample.
    seconds : int
        Number of leading steps kept.
    unit : int
        Steps per bin.

    Returns
    -------
    numpy.ndarray
        Integer vector of length ``ceil(seconds / unit)``. Bins past the end
        of a shorter ``presses`` stay zero.
    """

    values = np.asarray(presses[:seconds], dtype=np.int64)
    binned = np.zeros(n_bins(seconds, unit), dtype=np.int64)
    np.add.at(binned, np.arange(values.size) // unit, values)
    return binned


def aggregate_curve(
    samples: Sequence[Sample],
    curve: CurveConfig,
    *,
    curve_index: int = 0,
) -> tuple[BinStat, ...]:
    """Compute per-bin statistics for one curve.

    Parameters
    ----------
    samples : Sequence[Sample]
        Valid samples for the curve, in row order.
    curve : CurveConfig
        Curve binning configuration.
    curve_index : int, optional
        Position of the curve in the request, used in error messages.

    Returns
    -------
    tuple[BinStat, ...]
        One statistic per bin, ``ceil(seconds / unit)`` in total.

    Raises
    ------
    InvalidConfiguration
        If fewer than two samples are available, the time span is zero, or a
        sample is shorter than the time span under the ``"error"`` policy.
    """

    label = f"curve {curve_index} (column {curve.column_id})"
    _require_enough(len(samples), label=label)

    seconds = time_span(samples[0], curve)
    if seconds == 0:
        raise InvalidConfiguration(f"empty data: time span is 0 for {label}")

    kept = _apply_short_sample_policy(samples, curve, seconds=seconds, label=label)
    _require_enough(len(kept), label=label)

    binned = np.vstack([
        bin_presses(sample.truncated(seconds).presses, seconds=seconds, unit=curve.unit)
        for sample in kept
    ]).astype(np.float64)
    n = binned.shape[0]

    average = binned.sum(axis=0) / n
    variance = ((binned - average) ** 2 / (n - 1)).sum(axis=0)
    standard_error = np.sqrt(variance / n)

    logger.debug(
        "%s: n=%d, seconds=%d, unit=%d, bins=%d",
        label,
        n,
        seconds,
        curve.unit,
        average.size,
    )
    return tuple(
        BinStat(
            average=float(avg),
            standard_error=float(se),
            n_steps=min(curve.unit, seconds - bin_index * curve.unit),
        )
        for bin_index, (avg, se) in enumerate(zip(average, standard_error))
    )


def aggregate_run(run: AggregationRun) -> tuple[BinStat, ...]:
    """Compute per-bin statistics for one :class:`AggregationRun`."""

    return aggregate_curve(run.samples, run.curve, curve_index=run.curve_index)


def _require_enough(n: int, *, label: str) -> None:
    """Require at least two samples for a sample variance."""

    if n < 2:
        raise InvalidConfiguration(
            f"insufficient data: {n} valid sample(s) for {label}, at least 2 required"
        )


def _apply_short_sample_policy(
    samples: Sequence[Sample],
    curve: CurveConfig,
    *,
    seconds: int,
    label: str,
) -> list[Sample]:
    """Handle samples with fewer than ``seconds`` steps per the curve policy."""

    short = [position for position, sample in enumerate(samples) if sample.n_steps < seconds]
    if not short:
        return list(samples)

    if curve.short_samples == "error":
        position = short[0]
        raise InvalidConfiguration(
            f"{label}: sample {position} has {samples[position].n_steps} step(s), "
            f"shorter than the time span of {seconds}"
        )
    if curve.short_samples == "drop":
        logger.info("%s: dropping %d sample(s) shorter than %d step(s)", label, len(short), seconds)
        dropped = set(short)
        return [sample for position, sample in enumerate(samples) if position not in dropped]

    logger.info("%s: zero-padding %d sample(s) shorter than %d step(s)", label, len(short), seconds)
    return list(samples)


__all__ = ["aggregate_curve", "aggregate_run", "bin_presses", "n_bins", "time_span"]
