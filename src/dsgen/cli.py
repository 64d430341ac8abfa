"""
Command-line interface for dsgen.

Examples:
  # Generate every supported table at scale 1 into ./data
  dsgen generate --dir data

  # Generate date_dim and time_dim with 4 worker processes
  dsgen generate --table date_dim --table time_dim --parallelism 4

  # Settings from a YAML file, scale overridden on the command line
  dsgen generate --config run.yaml --scale 10

  # Row counts without generating anything
  dsgen row-count --scale 100
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import LOG_LEVELS, load_config
from .errors import DsgenError
from .generators import registered_tables
from .runner import generate_table
from .tables import TABLES, get_table


def _add_generate_parser(subparsers) -> None:
    parser = subparsers.add_parser("generate", help="Write <table>.dat files")
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with run settings",
    )
    parser.add_argument(
        "--scale",
        type=float,
        help="Scale factor (default: 1)",
    )
    parser.add_argument(
        "--dir",
        dest="output_dir",
        type=Path,
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--table",
        dest="tables",
        action="append",
        metavar="TABLE",
        help="Table to generate; repeat for several (default: all supported)",
    )
    parser.add_argument(
        "--parallelism",
        type=int,
        help="Worker processes per table (default: 1)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=None,
        help="Replace existing .dat files",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Logging level (default: INFO)",
    )


def _add_row_count_parser(subparsers) -> None:
    parser = subparsers.add_parser("row-count", help="Print row counts for a scale factor")
    parser.add_argument("--scale", type=float, default=1.0, help="Scale factor (default: 1)")
    parser.add_argument(
        "--table",
        dest="tables",
        action="append",
        metavar="TABLE",
        help="Table to report; repeat for several (default: all tables)",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dsgen",
        description="Deterministic TPC-DS style data generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_generate_parser(subparsers)
    _add_row_count_parser(subparsers)
    subparsers.add_parser("tables", help="List tables that have a row generator")
    return parser.parse_args(argv)


def run_generate(args: argparse.Namespace) -> int:
    config = load_config(
        args.config,
        scale=args.scale,
        output_dir=args.output_dir,
        tables=args.tables,
        parallelism=args.parallelism,
        overwrite=args.overwrite,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 60)
    print("dsgen - TPC-DS style data generation")
    print("=" * 60)
    print(f"Scale: {config.scale:g}")
    print(f"Output: {config.output_dir}")
    print(f"Tables: {', '.join(config.tables)}")
    print(f"Parallelism: {config.parallelism}")
    print()

    total_rows = 0
    total_time = 0.0
    for table in config.tables:
        result = generate_table(
            table,
            config.scale,
            config.output_dir,
            parallelism=config.parallelism,
            overwrite=config.overwrite,
            buffer_size_mb=config.buffer_size_mb,
        )
        rps = result.rows / result.elapsed if result.elapsed > 0 else 0
        print(f"  {table:<24} {result.rows:>10,} rows  {result.elapsed:6.2f}s ({rps:,.0f}/sec)")
        total_rows += result.rows
        total_time += result.elapsed

    print()
    print("=" * 60)
    print(f"Total rows: {total_rows:,}")
    print(f"Total time: {total_time:.2f}s")
    return 0


def run_row_count(args: argparse.Namespace) -> int:
    tables = args.tables or sorted(TABLES)
    for name in tables:
        spec = get_table(name)
        print(f"{spec.name}\t{spec.row_count(args.scale)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Run the dsgen CLI.

    Returns:
        0 on success, 1 on a dsgen error
    """
    args = parse_args(argv)
    try:
        if args.command == "generate":
            return run_generate(args)
        if args.command == "row-count":
            return run_row_count(args)
        for name in registered_tables():
            print(name)
        return 0
    except DsgenError as e:
        print(f"dsgen: error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
