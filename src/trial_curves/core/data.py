"""In-memory data model for curve aggregation.

A :class:`Sample` is one trial's decoded time series, a :class:`CurveConfig`
describes one output curve, and a :class:`BinStat` is one element of a curve's
output sequence.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from .errors import InvalidConfiguration

ShortSamplePolicy = Literal["error", "pad", "drop"]

SHORT_SAMPLE_POLICIES: tuple[str, ...] = ("error", "pad", "drop")


@dataclass(frozen=True, slots=True)
class Sample:
    """One trial's time series decoded from a table cell.

    Parameters
    ----------
    presses : tuple[int, ...]
        Non-negative press counts, one per time step. Only this field takes
        part in statistics.
    xs : tuple[int, ...], optional
        Auxiliary per-step series carried from the record.
    ls : tuple[int, ...], optional
        Auxiliary per-step series carried from the record.
    sum_presses : int, optional
        Recorded total of presses.
    sum_ls : int, optional
        Recorded total of ``ls``.
    sum_xs : int, optional
        Recorded total of ``xs``.
    seconds : int, optional
        Recorded trial duration.
    color_id : int, optional
        Recorded display color index.
    """

    presses: tuple[int, ...]
    xs: tuple[int, ...] = ()
    ls: tuple[int, ...] = ()
    sum_presses: int = 0
    sum_ls: int = 0
    sum_xs: int = 0
    seconds: int = 0
    color_id: int = 0

    @property
    def n_steps(self) -> int:
        """Return number of time steps in ``presses``."""

        return len(self.presses)

    def truncated(self, seconds: int) -> "Sample":
        """Return a copy keeping at most the first ``seconds`` presses."""

        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        if len(self.presses) <= seconds:
            return self
        return replace(self, presses=self.presses[:seconds])


@dataclass(frozen=True, slots=True)
class CurveConfig:
    """Binning configuration for one output curve.

    Parameters
    ----------
    column_id : int
        Zero-based table column holding this curve's samples.
    unit : int, optional
        Number of consecutive time steps summed into one bin. Must be >= 1.
    max_length : int, optional
        Upper bound on time steps considered. ``0`` uses the full length of
        the first valid sample.
    short_samples : {"error", "pad", "drop"}, optional
        Handling of samples with fewer than the curve's time span of steps.

    Raises
    ------
    InvalidConfiguration
        If any field is out of range.
    """

    column_id: int
    unit: int = 1
    max_length: int = 0
    short_samples: ShortSamplePolicy = "error"

    def __post_init__(self) -> None:
        if isinstance(self.column_id, bool) or not isinstance(self.column_id, int) or self.column_id < 0:
            raise InvalidConfiguration(f"column_id must be a non-negative integer, got {self.column_id!r}")
        if isinstance(self.unit, bool) or not isinstance(self.unit, int) or self.unit < 1:
            raise InvalidConfiguration(f"unit must be an integer >= 1, got {self.unit!r}")
        if isinstance(self.max_length, bool) or not isinstance(self.max_length, int) or self.max_length < 0:
            raise InvalidConfiguration(f"max_length must be a non-negative integer, got {self.max_length!r}")
        if self.short_samples not in SHORT_SAMPLE_POLICIES:
            raise InvalidConfiguration(
                f"short_samples must be one of {list(SHORT_SAMPLE_POLICIES)}, got {self.short_samples!r}"
            )


@dataclass(frozen=True, slots=True)
class BinStat:
    """Mean and standard error of one bin across samples.

    Parameters
    ----------
    average : float
        Mean of the binned press counts.
    standard_error : float
        Standard error of the mean.
    n_steps : int
        Number of time steps the bin covers. Equal to the curve unit except
        for a partial last bin.
    """

    average: float
    standard_error: float
    n_steps: int

    @property
    def lower(self) -> float:
        """Return the lower edge of the ``average ± standard_error`` band."""

        return self.average - self.standard_error

    @property
    def upper(self) -> float:
        """Return the upper edge of the ``average ± standard_error`` band."""

        return self.average + self.standard_error

    def to_dict(self) -> dict[str, float]:
        """Return the boundary representation of this bin."""

        return {"average": float(self.average), "standardError": float(self.standard_error)}


@dataclass(frozen=True, slots=True)
class AggregationRun:
    """One curve's config together with its successfully decoded samples.

    Parameters
    ----------
    curve_index : int
        Position of the curve in the request.
    curve : CurveConfig
        Curve binning configuration.
    samples : tuple[Sample, ...]
        Samples decoded from the curve's column, in row order.
    """

    curve_index: int
    curve: CurveConfig
    samples: tuple[Sample, ...]

    @property
    def n_samples(self) -> int:
        """Return number of samples in this run."""

        return len(self.samples)


__all__ = [
    "SHORT_SAMPLE_POLICIES",
    "AggregationRun",
    "BinStat",
    "CurveConfig",
    "Sample",
    "ShortSamplePolicy",
]
