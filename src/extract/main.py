"""
Incrementally move highlights from the e-reader export into a staging list.

Each run re-reads the whole export, numbers the target work's highlights,
and appends only those whose ordinal is beyond the ``Last processed`` value
recorded in the staging list header. Running it again with no new
highlights on the device leaves the staging list byte-for-byte unchanged.
"""

from pathlib import Path

from common.config import PipelineConfig
from common.errors import SourceNotFoundError
from common.logger import get_logger
from common.outcome import ExtractionOutcome, RunStatus
from staging.models import StagingList
from staging.staging_io import append_entries, read_staging_list

from .clippings import parse_clippings
from .models import Highlight, MergeResult

logger = get_logger(__name__)


def read_clippings(path: Path) -> str:
    """
    Read the export file.

    Raises:
        SourceNotFoundError: If the file is missing or unreadable
    """
    if not path.is_file():
        raise SourceNotFoundError(f"Clippings file not found at {path}")
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceNotFoundError(f"Could not read clippings file {path}: {e}") from e


def merge_new_highlights(staging: StagingList, highlights: list[Highlight]) -> MergeResult | None:
    """
    Work out what an extraction pass adds to the staging list.

    Args:
        staging: Current staging list
        highlights: Every highlight matched in this pass

    Returns:
        MergeResult, or None when nothing is newer than ``Last processed``
    """
    last_index = staging.metadata.last_extracted_index
    new_highlights = sorted(
        (h for h in highlights if h.ordinal > last_index), key=lambda h: h.ordinal
    )

    if not new_highlights:
        return None

    # Advance to the highest ordinal seen in the pass, never backwards
    highest = max(h.ordinal for h in highlights)
    metadata = staging.metadata.with_last_extracted(max(last_index, highest))

    return MergeResult(
        metadata=metadata,
        new_texts=[h.text for h in new_highlights if h.text],
        new_count=len(new_highlights),
    )


def extract_highlights(config: PipelineConfig) -> ExtractionOutcome:
    """
    Run one extraction pass.

    1. Read the export (fatal if missing)
    2. Parse the highlights of ``config.work_title``
    3. Compare ordinals with the staging list's ``Last processed``
    4. Append the new ones and advance the header, or do nothing

    Args:
        config: Pipeline configuration; ``work_title`` is required

    Returns:
        ExtractionOutcome describing what happened
    """
    if not config.work_title:
        return ExtractionOutcome(status=RunStatus.FAILED, message="No work title configured")

    logger.info(f"Processing highlights for: [bold]{config.work_title}[/bold]")

    try:
        content = read_clippings(config.clippings_path)
    except SourceNotFoundError as e:
        logger.error(f"[red]✗[/red] {e}")
        return ExtractionOutcome(status=RunStatus.FAILED, message=str(e))

    staging_path = config.staging_path
    try:
        staging = read_staging_list(staging_path)
    except (OSError, UnicodeDecodeError) as e:
        message = f"Could not read staging list {staging_path}: {e}"
        logger.error(f"[red]✗[/red] {message}")
        return ExtractionOutcome(status=RunStatus.FAILED, message=message, staging_path=staging_path)

    last_index = staging.metadata.last_extracted_index
    highlights = parse_clippings(content, config.work_title)

    if not highlights:
        logger.warning("No highlights found for this work")
        return ExtractionOutcome(
            status=RunStatus.NOOP,
            message="No highlights found for this work",
            staging_path=staging_path,
            last_extracted_index=last_index,
        )

    logger.info(f"Found [bold]{len(highlights)}[/bold] total highlight(s) for this work")
    logger.info(f"Previously saved: {len(staging)} highlight(s)")
    if last_index >= 0:
        logger.info(f"Last processed index: {last_index}")

    merge = merge_new_highlights(staging, highlights)

    if merge is None:
        logger.info("[green]✓[/green] No new highlights to add")
        return ExtractionOutcome(
            status=RunStatus.NOOP,
            message="No new highlights",
            staging_path=staging_path,
            matched=len(highlights),
            last_extracted_index=last_index,
        )

    logger.info(f"Adding [bold]{merge.new_count}[/bold] new highlight(s)")
    if len(merge.new_texts) < merge.new_count:
        logger.debug(f"{merge.new_count - len(merge.new_texts)} highlight(s) were empty after sanitizing")

    append_entries(staging_path, merge.metadata, merge.new_texts)

    logger.info(f"[green]✓[/green] Saved to: {staging_path}")
    logger.info(f"Total highlights in file: {len(staging) + len(merge.new_texts)}")

    return ExtractionOutcome(
        status=RunStatus.WRITTEN,
        message=f"Added {len(merge.new_texts)} highlight(s)",
        staging_path=staging_path,
        matched=len(highlights),
        appended=len(merge.new_texts),
        last_extracted_index=merge.metadata.last_extracted_index,
    )
