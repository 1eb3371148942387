"""
Command-line interface utilities.

This module provides CLI argument parsing and the main function for command-line operation.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from ..config import ParserConfig
from ..core.exceptions import NagParserError
from ..widgets.main_widget import NagParserWidget
from .logging_config import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="nag-parser",
        description="Parse NAG Fortran compiler output and convert it to JSON, CSV or XML.",
    )

    parser.add_argument(
        "file_paths", nargs="+", help="Paths to the compiler output files."
    )

    parser.add_argument(
        "--output-format",
        choices=["json", "csv", "xml"],
        default="json",
        help="Output format (default: json).",
    )

    parser.add_argument(
        "--output-file",
        default="nag_report",
        help="Base name for the output file without extension (default: nag_report).",
    )

    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for output files (default: current directory).",
    )

    parser.add_argument(
        "--priority",
        nargs="*",
        choices=["high", "normal", "low"],
        help="Keep only issues with these priorities.",
    )

    parser.add_argument(
        "--file-pattern", help="Regular expression to filter issues by file name."
    )

    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the compiler output files (default: utf-8).",
    )

    parser.add_argument(
        "--stats", action="store_true", help="Print statistics after parsing."
    )

    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging output."
    )

    parser.add_argument(
        "--concurrency",
        type=int,
        default=4,
        help="Number of concurrent threads for processing files (default: 4).",
    )

    parser.add_argument(
        "--no-color", action="store_true", help="Disable colorized output."
    )

    return parser.parse_args(argv)


def main_cli(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line operation."""
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "INFO")

    try:
        config = ParserConfig(
            encoding=args.encoding,
            concurrency=args.concurrency,
            priorities=args.priority or None,
            file_pattern=args.file_pattern,
        )
    except ValidationError as e:
        logger.error(f"Invalid options: {e}")
        return 2

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{args.output_file}.{args.output_format}"

    widget = NagParserWidget(config)

    try:
        report = widget.process_and_export(
            input_files=args.file_paths,
            output_format=args.output_format,
            output_path=output_path,
            display_stats=args.stats,
            display_output=True,
            colorize=not args.no_color,
        )
    except (NagParserError, OSError) as e:
        logger.error(f"Error processing compiler output: {e}")
        return 1

    print(f"\nOutput saved to: {output_path}")
    if len(report):
        print(f"Processed {len(report)} issues successfully.")
    else:
        print("No compiler issues found or all issues were filtered out.")

    return 0
