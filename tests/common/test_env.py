"""Tests for environment configuration interface."""

from pathlib import Path

from common.env import Environment, env


class TestEnvironment:
    """Tests for Environment class."""

    def test_openai_api_key_unset(self, monkeypatch):
        """Test openai_api_key returns None when unset."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assert Environment.openai_api_key() is None

    def test_openai_api_key_empty_is_none(self, monkeypatch):
        """Test an empty key counts as missing."""
        monkeypatch.setenv("OPENAI_API_KEY", "")
        assert Environment.openai_api_key() is None

    def test_openai_api_key_from_env(self, monkeypatch):
        """Test openai_api_key reads from environment."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert Environment.openai_api_key() == "sk-test"

    def test_openai_base_url_default(self, monkeypatch):
        """Test openai_base_url returns default value."""
        monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
        assert Environment.openai_base_url() == "https://api.openai.com/v1"

    def test_translation_model_default(self, monkeypatch):
        """Test translation_model returns default value."""
        monkeypatch.delenv("TRANSLATION_MODEL", raising=False)
        assert Environment.translation_model() == "gpt-4o-mini"

    def test_clippings_path_from_env(self, monkeypatch):
        """Test clippings_path reads from environment."""
        monkeypatch.setenv("CLIPPINGS_PATH", "/tmp/My Clippings.txt")
        assert Environment.clippings_path() == Path("/tmp/My Clippings.txt")

    def test_output_dir_default(self, monkeypatch):
        """Test output_dir returns default value."""
        monkeypatch.delenv("OUTPUT_DIR", raising=False)
        assert str(Environment.output_dir()) == "outputs"

    def test_work_title_unset(self, monkeypatch):
        """Test work_title returns None when unset."""
        monkeypatch.delenv("WORK_TITLE", raising=False)
        assert Environment.work_title() is None

    def test_languages_from_env(self, monkeypatch):
        """Test language names read from environment."""
        monkeypatch.setenv("SOURCE_LANGUAGE", "German")
        monkeypatch.setenv("TARGET_LANGUAGE", "English")
        assert Environment.source_language() == "German"
        assert Environment.target_language() == "English"

    def test_batch_size_default(self, monkeypatch):
        """Test batch_size returns default value."""
        monkeypatch.delenv("BATCH_SIZE", raising=False)
        assert Environment.batch_size() == 10

    def test_request_delay_from_env(self, monkeypatch):
        """Test request_delay parses a float."""
        monkeypatch.setenv("REQUEST_DELAY", "0.5")
        assert Environment.request_delay() == 0.5

    def test_singleton_instance(self, monkeypatch):
        """Test that the env singleton reads the same values."""
        monkeypatch.setenv("TRANSLATION_MODEL", "gpt-4o")
        assert env.translation_model() == "gpt-4o"
