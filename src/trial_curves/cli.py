"""Command-line interface for header inspection, aggregation and image export."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from trial_curves.aggregation.config import load_curve_configs, parse_curve_spec
from trial_curves.aggregation.coordinator import aggregate_table
from trial_curves.aggregation.serialization import write_curve_stats_csv, write_curve_stats_json
from trial_curves.core.data import CurveConfig
from trial_curves.core.errors import InvalidConfiguration, TrialCurvesError
from trial_curves.io.image import save_image
from trial_curves.io.tabular import read_table_header
from trial_curves.utils.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the ``trial-curves`` argument parser."""

    parser = argparse.ArgumentParser(
        prog="trial-curves",
        description="Aggregate per-trial press series from CSV into binned mean/standard-error curves.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for trial_curves (default: TRIAL_CURVES_LOG_LEVEL or INFO).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    header = subparsers.add_parser("header", help="Print the CSV header as a JSON list.")
    header.add_argument("--input-csv", required=True, help="Path to input CSV file.")

    agg = subparsers.add_parser("aggregate", help="Aggregate curves and write stats files.")
    agg.add_argument("--input-csv", required=True, help="Path to input CSV file.")
    source = agg.add_mutually_exclusive_group(required=True)
    source.add_argument("--config", help="Path to curve JSON or YAML config.")
    source.add_argument(
        "--curve",
        action="append",
        metavar="COLUMN[:UNIT[:MAX_LENGTH]]",
        help="Curve spec; repeat for several curves.",
    )
    agg.add_argument("--output-dir", default=".", help="Directory for output files.")
    agg.add_argument("--prefix", default="curves", help="Output filename prefix.")

    image = subparsers.add_parser("save-image", help="Decode a data-URL image into a file.")
    image.add_argument("--image-file", required=True, help="Text file holding the data URL.")
    image.add_argument("--output", required=True, help="Destination image path.")
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Run the ``trial-curves`` CLI.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        CLI argument list. When ``None``, process arguments are used.

    Returns
    -------
    int
        Exit code (`0` on success, `1` on a library error).
    """

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.log_level)

    try:
        if args.command == "header":
            print(json.dumps(read_table_header(args.input_csv)))
        elif args.command == "aggregate":
            _run_aggregate(args)
        else:
            _run_save_image(args)
    except TrialCurvesError as exc:
        print(f"error [{exc.kind}]: {exc.message}", file=sys.stderr)
        return 1
    return 0


def _run_aggregate(args: argparse.Namespace) -> None:
    """Aggregate curves and write JSON/CSV outputs."""

    curves = _resolve_curves(config=args.config, specs=args.curve)
    results = aggregate_table(args.input_csv, curves)

    output_dir = Path(args.output_dir)
    json_path = write_curve_stats_json(results, curves, output_dir / f"{args.prefix}_stats.json")
    csv_path = write_curve_stats_csv(results, curves, output_dir / f"{args.prefix}_stats.csv")

    print(f"Aggregation complete: curves={len(curves)}, bins={[len(stats) for stats in results]}")
    print(f"Stats JSON: {json_path}")
    print(f"Stats CSV: {csv_path}")


def _run_save_image(args: argparse.Namespace) -> None:
    """Decode a data URL from a text file and write the image."""

    image = Path(args.image_file).read_text(encoding="utf-8").strip()
    output = save_image(args.output, image)
    print(f"Image saved: {output}")


def _resolve_curves(*, config: str | None, specs: Sequence[str] | None) -> tuple[CurveConfig, ...]:
    """Resolve curves from a config file or repeated ``--curve`` specs."""

    if config is not None:
        return load_curve_configs(config)
    if not specs:
        raise InvalidConfiguration("no curve is requested")
    return tuple(parse_curve_spec(spec) for spec in specs)


def main() -> None:
    """Execute the CLI and exit with the returned code."""

    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()


__all__ = ["build_parser", "main", "run_cli"]
