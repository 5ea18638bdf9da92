"""Parsing and rendering of the staging list's metadata header.

The header is the first line of the file and looks like one of::

    # Last processed: 41
    # Translate from: 12
    # Last processed: 41 | Translate from: 12

A missing header or a garbled field never raises: the field simply falls
back to ``UNSET_INDEX``, which means "nothing processed yet".
"""

import re

from common.constants import (
    HEADER_FIELD_SEPARATOR,
    HEADER_MARKER,
    LAST_PROCESSED_LABEL,
    TRANSLATE_FROM_LABEL,
    UNSET_INDEX,
)

from .models import StagingMetadata

_FIELD_PATTERNS = {
    "last_extracted_index": re.compile(rf"{re.escape(LAST_PROCESSED_LABEL)}:\s*(\S*)"),
    "translate_from_index": re.compile(rf"{re.escape(TRANSLATE_FROM_LABEL)}:\s*(\S*)"),
}


def is_header(line: str) -> bool:
    """Check whether a line is a metadata header (carries at least one known label)."""
    if not line.startswith(HEADER_MARKER):
        return False
    return any(pattern.search(line) for pattern in _FIELD_PATTERNS.values())


def _parse_index(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        return UNSET_INDEX
    return value if value >= 0 else UNSET_INDEX


def parse_header(line: str | None) -> StagingMetadata:
    """Read the metadata fields out of a header line.

    Args:
        line: First line of the staging list, or None for an empty file

    Returns:
        StagingMetadata with UNSET_INDEX for every absent or unparsable field
    """
    if not line or not is_header(line):
        return StagingMetadata()

    values = {}
    for name, pattern in _FIELD_PATTERNS.items():
        match = pattern.search(line)
        values[name] = _parse_index(match.group(1)) if match else UNSET_INDEX

    return StagingMetadata(**values)


def format_header(metadata: StagingMetadata) -> str | None:
    """Render the header line for the established fields.

    Returns:
        Header text without a trailing newline, or None when neither field
        has been established yet
    """
    fields = []
    if metadata.last_extracted_index != UNSET_INDEX:
        fields.append(f"{LAST_PROCESSED_LABEL}: {metadata.last_extracted_index}")
    if metadata.translate_from_index != UNSET_INDEX:
        fields.append(f"{TRANSLATE_FROM_LABEL}: {metadata.translate_from_index}")

    if not fields:
        return None
    return HEADER_MARKER + HEADER_FIELD_SEPARATOR.join(fields)
