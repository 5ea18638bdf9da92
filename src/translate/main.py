"""
Translate new staging list entries and append them to the result table.

The ``Translate from`` checkpoint in the staging list header is the only
thing deciding what is new. Nothing is compared by value against the result
table, so a human must not reorder or delete staging list lines that sit
before the checkpoint: the offset would silently point at the wrong entry.

A run reads both files once at the start and writes each at most once at the
end. A failed call for one entry stores a sentinel row and still moves the
checkpoint past it; only a rejected credential aborts the run, and then
nothing is written.
"""

from collections.abc import Iterator
from typing import TypeVar

from common.config import PipelineConfig
from common.constants import TRANSLATION_EMPTY_SENTINEL, TRANSLATION_ERROR_SENTINEL
from common.errors import CredentialError, SourceNotFoundError, TranslationError
from common.logger import get_logger
from common.outcome import RunStatus, TranslationOutcome
from staging.staging_io import read_staging_list, rewrite_header

from .clients.base import TranslationClient
from .clients.rate_limiter import RequestPacer
from .models import ResultRow
from .result_table import append_rows, clean_translation, read_result_table

logger = get_logger(__name__)

T = TypeVar("T")


def iter_batches(items: list[T], size: int) -> Iterator[list[T]]:
    """Yield consecutive slices of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield items[start : start + size]


def translate_entry(
    client: TranslationClient,
    entry: str,
    source_language: str,
    target_language: str,
) -> tuple[ResultRow, bool]:
    """
    Translate one entry, turning per-call failures into sentinel rows.

    Returns:
        (row, succeeded)

    Raises:
        CredentialError: Propagated; it is fatal for the whole run
    """
    try:
        translation = client.translate(entry, source_language, target_language)
    except CredentialError:
        raise
    except TranslationError as e:
        logger.error(f"  [red]✗[/red] Error translating \"{entry}\": {e}")
        return ResultRow(original=entry, translation=TRANSLATION_ERROR_SENTINEL), False

    if not clean_translation(translation or ""):
        logger.warning(f"  Empty translation for \"{entry}\"")
        return ResultRow(original=entry, translation=TRANSLATION_EMPTY_SENTINEL), False

    logger.info(f"  [green]✓[/green] Translated: \"{entry}\" → \"{translation}\"")
    return ResultRow(original=entry, translation=translation), True


def translate_new_entries(
    config: PipelineConfig,
    client: TranslationClient,
    pacer: RequestPacer | None = None,
) -> TranslationOutcome:
    """
    Run one translation pass.

    1. Read the staging list (fatal if missing) and its ``Translate from``
    2. Stop early if no entry sits at or after the checkpoint
    3. Read the result table to report its size
    4. Translate each pending entry, pausing between calls
    5. Append all rows, then advance the checkpoint by the number appended

    Args:
        config: Pipeline configuration
        client: Translation capability
        pacer: Pacing between calls (default: ``config.request_delay``)

    Returns:
        TranslationOutcome describing what happened
    """
    pacer = pacer or RequestPacer(config.request_delay)
    staging_path = config.staging_path
    result_path = config.result_path

    try:
        if not staging_path.is_file():
            raise SourceNotFoundError(f"Input file not found: {staging_path}")
        staging = read_staging_list(staging_path)
    except (SourceNotFoundError, OSError, UnicodeDecodeError) as e:
        logger.error(f"[red]✗[/red] {e}")
        return TranslationOutcome(status=RunStatus.FAILED, message=str(e), result_path=result_path)

    checkpoint = staging.metadata.translate_from_index
    start = max(checkpoint, 0)

    if start > len(staging):
        logger.warning(
            f"Checkpoint {start} is beyond the {len(staging)} entries in {staging_path.name}; "
            "lines before it were probably removed"
        )

    pending = staging.entries[start:]

    if not pending:
        logger.info("[green]✓[/green] No entries to translate")
        return TranslationOutcome(
            status=RunStatus.NOOP,
            message="No entries to translate",
            result_path=result_path,
            translate_from_index=checkpoint,
        )

    existing_rows = read_result_table(result_path)
    logger.info(f"Found {len(existing_rows)} existing translation(s) in {result_path.name}")
    logger.info(f"Found {len(staging)} entries in {staging_path.name}")
    logger.info(f"Starting translation from index {start} ({len(pending)} new entries)")
    logger.info(f"Translating from {config.source_language} to {config.target_language}...")

    new_rows: list[ResultRow] = []
    failed = 0
    total_batches = -(-len(pending) // config.batch_size)

    try:
        for batch_number, batch in enumerate(iter_batches(pending, config.batch_size), start=1):
            logger.info(f"Processing batch {batch_number}/{total_batches}...")
            for entry in batch:
                pacer.wait_if_needed()
                row, succeeded = translate_entry(
                    client, entry, config.source_language, config.target_language
                )
                new_rows.append(row)
                if not succeeded:
                    failed += 1
    except CredentialError as e:
        logger.error(f"[red]✗[/red] {e}")
        return TranslationOutcome(
            status=RunStatus.FAILED,
            message=str(e),
            result_path=result_path,
            total_rows=len(existing_rows),
            translate_from_index=checkpoint,
        )

    append_rows(result_path, new_rows)

    new_checkpoint = start + len(new_rows)
    rewrite_header(staging_path, staging.metadata.with_translate_from(new_checkpoint))

    total_rows = len(existing_rows) + len(new_rows)
    logger.info(f"[green]✓[/green] Translations written to: {result_path}")
    logger.info(f"New translations: {len(new_rows)} ({failed} failed)")
    logger.info(f"Total entries in table: {total_rows}")
    logger.info(f"[green]✓[/green] Updated header: Translate from: {new_checkpoint}")

    return TranslationOutcome(
        status=RunStatus.WRITTEN,
        message=f"Translated {len(new_rows) - failed} of {len(new_rows)} entries",
        result_path=result_path,
        appended=len(new_rows),
        failed=failed,
        total_rows=total_rows,
        translate_from_index=new_checkpoint,
    )
