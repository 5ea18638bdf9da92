#!/usr/bin/env python3
"""CLI interface for translating staged highlights."""

import argparse
from pathlib import Path

from common.config import PipelineConfig
from common.errors import CredentialError
from common.logger import setup_logging

from .clients.openai_chat import OpenAIChatClient
from .main import translate_new_entries


def cmd_translate(args):
    """Translate entries added since the last run.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        config = PipelineConfig.from_env(
            work_title=args.work,
            output_dir=args.output_dir,
            staging_override=args.staging,
            result_override=args.results,
            source_language=args.source_language,
            target_language=args.target_language,
            batch_size=args.batch_size,
            request_delay=args.delay,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if config.staging_override is None and not config.work_title:
        print("Error: Either --work (or $WORK_TITLE) or --staging is required")
        return 1

    try:
        client = OpenAIChatClient.from_env()
    except CredentialError as e:
        print(f"Error: {e}")
        return 1

    outcome = translate_new_entries(config, client)
    if not outcome.ok:
        print(f"Error: {outcome.message}")
    return outcome.exit_code


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Translate new staging list entries into the result table"
    )
    parser.add_argument(
        "--work",
        default=None,
        help="Work title used to derive file names (default: $WORK_TITLE)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for staging lists and tables (default: $OUTPUT_DIR or ./outputs)",
    )
    parser.add_argument(
        "--staging",
        type=Path,
        default=None,
        help="Explicit staging list path (default: derived from the work title)",
    )
    parser.add_argument(
        "--results",
        type=Path,
        default=None,
        help="Explicit result table path (default: staging list path with .csv)",
    )
    parser.add_argument(
        "--from",
        dest="source_language",
        default=None,
        metavar="LANG",
        help="Source language (default: $SOURCE_LANGUAGE)",
    )
    parser.add_argument(
        "--to",
        dest="target_language",
        default=None,
        metavar="LANG",
        help="Target language (default: $TARGET_LANGUAGE)",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Entries per progress batch (default: $BATCH_SIZE or 10)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds between translation calls (default: $REQUEST_DELAY or 0.1)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.set_defaults(func=cmd_translate)

    args = parser.parse_args(argv)
    setup_logging(log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
