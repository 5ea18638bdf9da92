"""Data models for the staging list."""

from dataclasses import dataclass, field, replace

from common.constants import UNSET_INDEX


@dataclass(frozen=True)
class StagingMetadata:
    """Processing position recorded in the staging list header.

    ``last_extracted_index`` is owned by the extractor and
    ``translate_from_index`` by the translator. Each component must carry
    the other's field through unchanged when it rewrites the header.
    """

    last_extracted_index: int = UNSET_INDEX
    translate_from_index: int = UNSET_INDEX

    def with_last_extracted(self, index: int) -> "StagingMetadata":
        return replace(self, last_extracted_index=index)

    def with_translate_from(self, index: int) -> "StagingMetadata":
        return replace(self, translate_from_index=index)


@dataclass
class StagingList:
    """Parsed staging list: header metadata plus ordered entry lines."""

    metadata: StagingMetadata = field(default_factory=StagingMetadata)
    entries: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)
