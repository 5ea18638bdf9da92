"""Tests for the pipeline configuration record."""

from pathlib import Path

import pytest

from common.config import PipelineConfig, sanitize_filename


class TestSanitizeFilename:
    """Tests for sanitize_filename."""

    def test_replaces_non_alphanumerics(self):
        assert sanitize_filename("L'homme qui savait") == "l_homme_qui_savait"

    def test_accented_letters_become_underscores(self):
        assert sanitize_filename("Phénix") == "ph_nix"


class TestPipelineConfig:
    """Tests for PipelineConfig."""

    def test_staging_path_derived_from_title(self, tmp_path):
        """Test the default staging list location."""
        config = PipelineConfig(work_title="Harry Potter", output_dir=tmp_path)
        assert config.staging_path == tmp_path / "harry_potter.txt"

    def test_result_path_next_to_staging(self, tmp_path):
        """Test the result table defaults to the staging path with .csv."""
        config = PipelineConfig(work_title="Harry Potter", output_dir=tmp_path)
        assert config.result_path == tmp_path / "harry_potter.csv"

    def test_overrides_win(self, tmp_path):
        """Test explicit paths take precedence over derived ones."""
        config = PipelineConfig(
            work_title="Ignored",
            staging_override=tmp_path / "list.txt",
            result_override=tmp_path / "table.csv",
        )
        assert config.staging_path == tmp_path / "list.txt"
        assert config.result_path == tmp_path / "table.csv"

    def test_staging_path_requires_title_or_override(self):
        """Test that no title and no override is an error."""
        config = PipelineConfig(work_title=None)
        with pytest.raises(ValueError):
            config.staging_path

    def test_rejects_bad_batch_size(self):
        with pytest.raises(ValueError):
            PipelineConfig(work_title="x", batch_size=0)

    def test_rejects_negative_delay(self):
        with pytest.raises(ValueError):
            PipelineConfig(work_title="x", request_delay=-1)

    def test_from_env_reads_environment(self, monkeypatch):
        """Test that from_env falls back to environment values."""
        monkeypatch.setenv("WORK_TITLE", "Dune")
        monkeypatch.setenv("OUTPUT_DIR", "/tmp/out")
        monkeypatch.setenv("BATCH_SIZE", "3")
        config = PipelineConfig.from_env()
        assert config.work_title == "Dune"
        assert config.output_dir == Path("/tmp/out")
        assert config.batch_size == 3

    def test_from_env_ignores_none_overrides(self, monkeypatch):
        """Test that None overrides keep the environment value."""
        monkeypatch.setenv("SOURCE_LANGUAGE", "French")
        config = PipelineConfig.from_env(work_title="Dune", source_language=None)
        assert config.source_language == "French"

    def test_from_env_override_wins(self, monkeypatch):
        monkeypatch.setenv("WORK_TITLE", "Dune")
        config = PipelineConfig.from_env(work_title="Emma")
        assert config.work_title == "Emma"
