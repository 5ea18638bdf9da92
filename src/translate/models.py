"""Data models for the translation stage."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultRow:
    """One row of the result table."""

    original: str
    translation: str
