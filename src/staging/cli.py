#!/usr/bin/env python3
"""CLI that reports where a staging list and its result table stand."""

import argparse
from pathlib import Path

from common.config import PipelineConfig
from common.logger import get_logger, setup_logging
from translate.result_table import read_result_table

from .staging_io import read_staging_list

logger = get_logger(__name__)


def _describe(index: int) -> str:
    return str(index) if index >= 0 else "not set"


def cmd_status(args):
    """Show metadata, entry counts and result table size."""
    try:
        config = PipelineConfig.from_env(
            work_title=args.work,
            output_dir=args.output_dir,
            staging_override=args.staging,
            result_override=args.results,
        )
        staging_path = config.staging_path
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if not staging_path.exists():
        logger.warning(f"No staging list at {staging_path}")
        return 1

    staging = read_staging_list(staging_path)
    rows = read_result_table(config.result_path)
    start = max(staging.metadata.translate_from_index, 0)
    pending = max(len(staging) - start, 0)

    logger.info(f"\nStaging list: {staging_path}")
    logger.info("=" * 50)
    logger.info(f"  Entries:            {len(staging):5d}")
    logger.info(f"  Last processed:     {_describe(staging.metadata.last_extracted_index):>5}")
    logger.info(f"  Translate from:     {_describe(staging.metadata.translate_from_index):>5}")
    logger.info(f"  Pending:            {pending:5d}")
    logger.info(f"\nResult table: {config.result_path}")
    logger.info(f"  Rows:               {len(rows):5d}")

    if start > len(staging):
        logger.warning(
            "Translate from is beyond the last entry; lines were removed from the staging list"
        )

    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Show staging list and result table status")
    parser.add_argument("--work", default=None, help="Work title (default: $WORK_TITLE)")
    parser.add_argument("--output-dir", type=Path, default=None, help="Output directory")
    parser.add_argument("--staging", type=Path, default=None, help="Explicit staging list path")
    parser.add_argument("--results", type=Path, default=None, help="Explicit result table path")
    parser.set_defaults(func=cmd_status)

    args = parser.parse_args(argv)
    setup_logging()
    return args.func(args)


if __name__ == "__main__":
    exit(main())
