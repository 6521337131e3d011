"""Command-line interface for gdopp."""

import argparse
import logging
import sys
from pathlib import Path

import polars as pl
import pyarrow.parquet as pq

from ..config import GDoppConfig, ThresholdConfig, WindowConfig
from ..constants import WINDOW_COLUMN
from .windows import check_windows, window_adv

logger = logging.getLogger(__name__)

PARQUET_EXTENSIONS = {".parquet", ".pq"}
CSV_EXTENSIONS = {".csv", ".txt", ".dat"}


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Run data quality checks on windowed ADV data"
    )
    parser.add_argument("input", help="Input CSV or Parquet file path")
    parser.add_argument(
        "-o",
        "--output",
        help="Output file (.csv or .parquet); CSV to stdout when omitted",
    )
    parser.add_argument(
        "-t",
        "--test",
        action="append",
        dest="tests",
        help="Check name to run (repeatable, default: all)",
    )
    parser.add_argument(
        "--signal-threshold", type=float, help="Signal-to-noise threshold (0-100)"
    )
    parser.add_argument(
        "--correlation-threshold", type=float, help="Beam correlation threshold (0-100)"
    )
    parser.add_argument(
        "--freq", type=float, help="Sampling frequency in Hz for windowing"
    )
    parser.add_argument(
        "--window-mins", type=float, help="Burst length in minutes for windowing"
    )
    parser.add_argument(
        "--drop-partial",
        action="store_true",
        help="Drop a trailing incomplete burst when windowing",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    return parser


def validate_input_file(input_path: Path) -> None:
    """Validate input file exists and is a file.

    Args:
        input_path: Path to input data file

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If path is not a file
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file does not exist: {input_path}")

    if not input_path.is_file():
        raise ValueError(f"Input path is not a file: {input_path}")

    suffix = input_path.suffix.lower()
    if suffix not in PARQUET_EXTENSIONS | CSV_EXTENSIONS:
        logger.warning(
            f"File extension '{input_path.suffix}' not recognised. Reading as CSV."
        )


def load_data(input_path: Path) -> pl.DataFrame:
    """Read ADV data from CSV or Parquet."""
    if input_path.suffix.lower() in PARQUET_EXTENSIONS:
        return pl.read_parquet(input_path)
    return pl.read_csv(input_path, null_values=["NA", "NaN", ""])


def build_config(args: argparse.Namespace) -> GDoppConfig:
    """Merge command-line options over the environment configuration."""
    base = GDoppConfig.from_env()
    thresholds = ThresholdConfig(
        signal_threshold=(
            args.signal_threshold
            if args.signal_threshold is not None
            else base.thresholds.signal_threshold
        ),
        correlation_threshold=(
            args.correlation_threshold
            if args.correlation_threshold is not None
            else base.thresholds.correlation_threshold
        ),
    )
    windows = WindowConfig(
        freq=args.freq if args.freq is not None else base.windows.freq,
        window_mins=(
            args.window_mins if args.window_mins is not None else base.windows.window_mins
        ),
        drop_partial=args.drop_partial,
    )
    tests = tuple(args.tests) if args.tests else base.tests
    return GDoppConfig(thresholds=thresholds, windows=windows, tests=tests)


def write_output(result: pl.DataFrame, output: str | None) -> None:
    """Write the verdict table to a file, or as CSV to stdout.

    Args:
        result: Per-window verdict table
        output: Output path, or None for stdout
    """
    if output is None:
        sys.stdout.write(result.write_csv())
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix.lower() in PARQUET_EXTENSIONS:
        pq.write_table(result.to_arrow(), output_path, compression="snappy")
    else:
        result.write_csv(output_path)
    logger.debug(f"Wrote verdicts: {output_path}")


def main(argv: list[str] | None = None) -> int:
    """Command-line interface for ADV quality checking.

    Usage:
        python -m gdopp data.csv [options]

    Examples:
        # Window a 32 Hz record into 10 minute bursts and run all checks
        python -m gdopp ALQ102.csv --freq 32 --window-mins 10

        # Only beam correlation, stricter threshold, to Parquet
        python -m gdopp windowed.parquet -t beam.correlation_check_adv \\
            --correlation-threshold 95 -o verdicts.parquet

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(level=(logging.DEBUG if args.verbose else logging.INFO))

    try:
        input_path = Path(args.input)
        validate_input_file(input_path)
        config = build_config(args)

        data = load_data(input_path)
        if WINDOW_COLUMN not in data.columns:
            logger.info(
                f"No '{WINDOW_COLUMN}' column, windowing at {config.windows.freq} Hz "
                f"into {config.windows.window_mins} minute bursts"
            )
            data = window_adv(
                data,
                freq=config.windows.freq,
                window_mins=config.windows.window_mins,
                drop_partial=config.windows.drop_partial,
            )

        result = check_windows(
            data, list(config.tests), **config.thresholds.as_params()
        )
        write_output(result, args.output)

        logger.info(f"Successfully checked {args.input}")
        return 0

    except Exception as e:
        match e:
            case FileNotFoundError() | ValueError() | PermissionError():
                logger.error(str(e))
            case OSError():
                logger.error(f"OS error while processing file {args.input}: {e}")
            case _:
                logger.error(f"Unexpected error while checking file {args.input}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
