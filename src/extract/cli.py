#!/usr/bin/env python3
"""CLI interface for highlight extraction."""

import argparse
from pathlib import Path

from common.config import PipelineConfig
from common.logger import setup_logging

from .main import extract_highlights


def cmd_extract(args):
    """Append new highlights of one work to its staging list.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        config = PipelineConfig.from_env(
            work_title=args.work,
            clippings_path=args.clippings,
            output_dir=args.output_dir,
            staging_override=args.staging,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    outcome = extract_highlights(config)
    if not outcome.ok:
        print(f"Error: {outcome.message}")
    return outcome.exit_code


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Extract new highlights of a work from the e-reader export"
    )
    parser.add_argument(
        "--work",
        default=None,
        help="Title (or part of it) identifying the work (default: $WORK_TITLE)",
    )
    parser.add_argument(
        "--clippings",
        type=Path,
        default=None,
        help="Path to the highlights export (default: $CLIPPINGS_PATH)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for staging lists (default: $OUTPUT_DIR or ./outputs)",
    )
    parser.add_argument(
        "--staging",
        type=Path,
        default=None,
        help="Explicit staging list path (default: derived from the work title)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.set_defaults(func=cmd_extract)

    args = parser.parse_args(argv)
    setup_logging(log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
