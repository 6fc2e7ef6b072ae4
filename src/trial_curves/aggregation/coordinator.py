"""Concurrent, order-preserving aggregation across curves.

Each curve is aggregated in its own asyncio task over its own
:class:`~trial_curves.core.data.AggregationRun`; tasks share no mutable state.
Results come back index-aligned with the requested curves. The first failing
curve fails the whole request and cancels the tasks still pending.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from trial_curves.core.data import AggregationRun, BinStat, CurveConfig, Sample
from trial_curves.core.errors import InvalidConfiguration
from trial_curves.io.tabular import Table, read_table
from trial_curves.utils.logging import get_logger

from .binning import aggregate_run
from .extract import extract_curve_samples

logger = get_logger(__name__)

TableSource = Table | str | Path


async def aggregate_curves(
    samples_per_curve: Sequence[Sequence[Sample]],
    curves: Sequence[CurveConfig],
) -> list[tuple[BinStat, ...]]:
    """Aggregate every curve concurrently.

    Parameters
    ----------
    samples_per_curve : Sequence[Sequence[Sample]]
        Valid samples per curve, index-aligned with ``curves``.
    curves : Sequence[CurveConfig]
        Requested curves.

    Returns
    -------
    list[tuple[BinStat, ...]]
        One statistics sequence per curve, in ``curves`` order.

    Raises
    ------
    InvalidConfiguration
        If no curve is requested, the inputs are not aligned, or any curve
        fails to aggregate.
    """

    if not curves:
        raise InvalidConfiguration("no curve is requested")
    if len(samples_per_curve) != len(curves):
        raise InvalidConfiguration(
            f"got sample lists for {len(samples_per_curve)} curve(s), expected {len(curves)}"
        )

    runs = [
        AggregationRun(curve_index=index, curve=curve, samples=tuple(samples))
        for index, (samples, curve) in enumerate(zip(samples_per_curve, curves))
    ]
    tasks = [
        asyncio.create_task(_aggregate_one(run), name=f"aggregate-curve-{run.curve_index}")
        for run in runs
    ]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise
    return list(results)


async def aggregate(
    table_source: TableSource,
    curves: Sequence[CurveConfig],
) -> list[tuple[BinStat, ...]]:
    """Read a table and aggregate every requested curve.

    Parameters
    ----------
    table_source : Table | str | pathlib.Path
        Loaded table, or a CSV path read in a worker thread.
    curves : Sequence[CurveConfig]
        Requested curves.

    Returns
    -------
    list[tuple[BinStat, ...]]
        One statistics sequence per curve, in ``curves`` order.

    Raises
    ------
    InvalidConfiguration
        If no curve is requested or any curve cannot be aggregated.
    TableReadError
        If the table cannot be read.
    """

    if not curves:
        raise InvalidConfiguration("no curve is requested")

    if isinstance(table_source, Table):
        table = table_source
    else:
        table = await asyncio.to_thread(read_table, table_source)

    samples_per_curve = extract_curve_samples(table.rows, curves)
    return await aggregate_curves(samples_per_curve, curves)


def aggregate_table(
    table_source: TableSource,
    curves: Sequence[CurveConfig],
) -> list[tuple[BinStat, ...]]:
    """Synchronous wrapper around :func:`aggregate` for scripts and the CLI."""

    return asyncio.run(aggregate(table_source, curves))


async def _aggregate_one(run: AggregationRun) -> tuple[BinStat, ...]:
    """Aggregate one curve inside its own task."""

    result = aggregate_run(run)
    logger.debug("curve %d aggregated into %d bin(s)", run.curve_index, len(result))
    return result


__all__ = ["TableSource", "aggregate", "aggregate_curves", "aggregate_table"]
