"""Outcome records returned by pipeline entry points.

Components never exit the process. They return one of these records and
the CLI decides which exit code the status maps to.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RunStatus(Enum):
    """How a pipeline run ended."""

    WRITTEN = "written"
    NOOP = "noop"
    FAILED = "failed"


@dataclass
class RunOutcome:
    """Common fields of every run outcome."""

    status: RunStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is not RunStatus.FAILED

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


@dataclass
class ExtractionOutcome(RunOutcome):
    """Result of one extractor run."""

    staging_path: Path | None = None
    matched: int = 0
    appended: int = 0
    last_extracted_index: int = -1


@dataclass
class TranslationOutcome(RunOutcome):
    """Result of one translator run."""

    result_path: Path | None = None
    appended: int = 0
    failed: int = 0
    total_rows: int = 0
    translate_from_index: int = -1
