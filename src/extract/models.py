"""Data models for highlight extraction."""

from dataclasses import dataclass

from staging.models import StagingMetadata


@dataclass(frozen=True)
class Highlight:
    """A sanitized highlight from the export.

    ``ordinal`` counts only the blocks of the target work, in export order.
    It stays stable as long as the device only ever appends to the export.
    """

    text: str
    ordinal: int


@dataclass
class MergeResult:
    """What an extraction pass adds to the staging list."""

    metadata: StagingMetadata
    new_texts: list[str]
    new_count: int
