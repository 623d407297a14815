"""
Command-line interface for reading simulation output files.

This module handles CLI argument parsing, logging configuration,
and rendering parsed tables to stdout.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from sim_output_parser.config_models import ReaderConfig
from sim_output_parser.parsers.output_parser import OutputParser, format_value

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def write_stats(table: OutputParser, out: TextIO) -> None:
    """Write one summary line per column of a parsed table."""
    out.write("column\tstart_row\tsamples\tminimum\tmaximum\trange\n")
    for column in table.columns:
        column.compute_stats()
        name = column.header or "(unnamed)"
        if column is table.time:
            name += " [time]"
        out.write("\t".join([
            name,
            str(column.start_row),
            str(len(column.values)),
            format_value(column.minimum),
            format_value(column.maximum),
            format_value(column.range),
        ]) + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Returns:
        Exit code: 0 = success, 1 = all files failed, 2 = partial failure
    """
    parser = argparse.ArgumentParser(
        description="Read whitespace-delimited simulation output (including Xyce PRN)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a file as tab-separated text
  sim-output out.prn

  # Summarize each column
  sim-output --stats out

  # Fill gaps with NaN instead of 0
  sim-output --default nan out

  # Read settings (sidecar suffix, time names, ...) from a JSON file
  sim-output --config reader.json out
        """
    )
    parser.add_argument("input_files", nargs="+", type=Path, help="Output files to read")
    parser.add_argument("--config", type=Path, help="Reader config JSON file")
    parser.add_argument("--default", dest="default_value", type=float,
                       help="Value for empty fields and missing rows (overrides config)")
    parser.add_argument("--stats", action="store_true",
                       help="Print per-column statistics instead of the table")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                       help="Logging level")

    args = parser.parse_args(argv)
    logging.getLogger().setLevel(args.log_level)

    try:
        config = ReaderConfig.from_json_file(str(args.config)) if args.config else ReaderConfig()
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return 1
    if args.default_value is not None:
        config = config.model_copy(update={"default_value": args.default_value})

    file_errors = {}
    for path in args.input_files:
        if not path.is_file():
            file_errors[str(path)] = "file not found"
            logger.error(f"File not found: {path}")
            continue

        with OutputParser(config) as table:
            table.parse(path)
            if args.stats:
                if len(args.input_files) > 1:
                    sys.stdout.write(f"# {path}\n")
                write_stats(table, sys.stdout)
            else:
                table.dump(sys.stdout)

    # Determine exit code
    failed_file_count = len(file_errors)
    if failed_file_count == 0:
        return 0
    elif failed_file_count == len(args.input_files):
        return 1
    else:
        return 2


if __name__ == "__main__":
    sys.exit(main())
