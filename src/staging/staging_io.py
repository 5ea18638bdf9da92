"""Staging list file I/O.

The staging list is a UTF-8 text file: an optional metadata header on line
one, then one highlight per line. People edit the body by hand between
runs, so every write below keeps existing body lines as they are and only
touches the header or appends at the end.
"""

from pathlib import Path

from .header import format_header, is_header, parse_header
from .models import StagingList, StagingMetadata


def _split_file(path: Path) -> tuple[str | None, list[str]]:
    """Return (header line or None, raw body lines) for an existing file."""
    lines = path.read_text(encoding="utf-8").splitlines()
    if lines and is_header(lines[0]):
        return lines[0], lines[1:]
    return None, lines


def _write_file(path: Path, metadata: StagingMetadata, body: list[str]) -> None:
    header = format_header(metadata)
    lines = ([header] if header is not None else []) + body

    path.parent.mkdir(parents=True, exist_ok=True)
    content = "\n".join(lines) + "\n" if lines else ""
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)


def read_staging_list(path: Path) -> StagingList:
    """
    Read a staging list.

    Blank lines are ignored and entries are whitespace-trimmed, so offsets
    count non-blank lines only. A missing file reads as an empty list with
    unset metadata.

    Args:
        path: Staging list file

    Returns:
        StagingList
    """
    if not path.exists():
        return StagingList()

    header, body = _split_file(path)
    entries = [line.strip() for line in body if line.strip()]
    return StagingList(
        metadata=parse_header(header),
        entries=entries,
    )


def read_metadata(path: Path) -> StagingMetadata:
    """Read only the header metadata of a staging list."""
    return read_staging_list(path).metadata


def append_entries(path: Path, metadata: StagingMetadata, texts: list[str]) -> None:
    """
    Append entries and rewrite the header in one write.

    Existing body lines are kept verbatim and in order.

    Args:
        path: Staging list file (created if missing)
        metadata: Header to write
        texts: New entry lines, in order
    """
    body: list[str] = []
    if path.exists():
        _, body = _split_file(path)
    _write_file(path, metadata, body + list(texts))


def rewrite_header(path: Path, metadata: StagingMetadata) -> None:
    """Replace the header line (inserting one if absent), leaving the body alone."""
    _, body = _split_file(path)
    _write_file(path, metadata, body)
