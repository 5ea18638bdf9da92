"""Explicit configuration record for the pipeline entry points."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from .env import env


def sanitize_filename(name: str) -> str:
    """Turn a work title into a safe file stem.

    Example:
        >>> sanitize_filename("L'homme qui savait")
        'l_homme_qui_savait'
    """
    return re.sub(r"[^a-z0-9]", "_", name, flags=re.IGNORECASE).lower()


@dataclass
class PipelineConfig:
    """Everything a run needs, read once at startup.

    Changing these values between runs on the same state files is the
    operator's responsibility; nothing checks it.
    """

    work_title: str | None = None
    clippings_path: Path = field(default_factory=env.clippings_path)
    output_dir: Path = field(default_factory=env.output_dir)
    staging_override: Path | None = None
    result_override: Path | None = None
    source_language: str = field(default_factory=env.source_language)
    target_language: str = field(default_factory=env.target_language)
    batch_size: int = field(default_factory=env.batch_size)
    request_delay: float = field(default_factory=env.request_delay)

    def __post_init__(self):
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")
        if self.request_delay < 0:
            raise ValueError(f"request_delay cannot be negative, got {self.request_delay}")

    @property
    def staging_path(self) -> Path:
        """Staging list location, derived from the work title unless overridden."""
        if self.staging_override is not None:
            return self.staging_override
        if not self.work_title:
            raise ValueError("Either a work title or an explicit staging path is required")
        return self.output_dir / f"{sanitize_filename(self.work_title)}.txt"

    @property
    def result_path(self) -> Path:
        """Result table location, next to the staging list unless overridden."""
        if self.result_override is not None:
            return self.result_override
        return self.staging_path.with_suffix(".csv")

    @classmethod
    def from_env(cls, **overrides) -> "PipelineConfig":
        """Build a config from the environment, letting non-None overrides win."""
        values = {key: value for key, value in overrides.items() if value is not None}
        values.setdefault("work_title", env.work_title())
        return cls(**values)
