"""Environment configuration interface for highlight-lexicon.

All environment variable access goes through this module. Values are read
lazily on each call so tests can adjust them with ``monkeypatch``.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def openai_api_key() -> str | None:
        """Get the API key for the translation service.

        Returns:
            API key, or None when it is not set
        """
        return os.getenv("OPENAI_API_KEY") or None

    @staticmethod
    def openai_base_url() -> str:
        """Get the base URL of the OpenAI-compatible API.

        Returns:
            Base URL, defaults to https://api.openai.com/v1
        """
        return os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")

    @staticmethod
    def translation_model() -> str:
        """Get the chat model used for translation.

        Returns:
            Model name, defaults to 'gpt-4o-mini'
        """
        return os.getenv("TRANSLATION_MODEL", "gpt-4o-mini")

    @staticmethod
    def clippings_path() -> Path:
        """Get the path of the e-reader's highlights export.

        Returns:
            Path, defaults to the Kindle mount point on macOS
        """
        return Path(os.getenv("CLIPPINGS_PATH", "/Volumes/Kindle/documents/My Clippings.txt"))

    @staticmethod
    def output_dir() -> Path:
        """Get the directory holding staging lists and result tables.

        Returns:
            Path, defaults to ./outputs
        """
        return Path(os.getenv("OUTPUT_DIR", "./outputs"))

    @staticmethod
    def work_title() -> str | None:
        """Get the title of the work whose highlights are processed."""
        return os.getenv("WORK_TITLE") or None

    @staticmethod
    def source_language() -> str:
        """Get the language highlights are written in.

        Returns:
            Language name, defaults to 'French'
        """
        return os.getenv("SOURCE_LANGUAGE", "French")

    @staticmethod
    def target_language() -> str:
        """Get the language highlights are translated to.

        Returns:
            Language name, defaults to 'Brazilian Portuguese'
        """
        return os.getenv("TARGET_LANGUAGE", "Brazilian Portuguese")

    @staticmethod
    def batch_size() -> int:
        """Get the number of entries per progress batch.

        Returns:
            Batch size, defaults to 10
        """
        return int(os.getenv("BATCH_SIZE", "10"))

    @staticmethod
    def request_delay() -> float:
        """Get the pause between translation calls, in seconds.

        Returns:
            Delay, defaults to 0.1
        """
        return float(os.getenv("REQUEST_DELAY", "0.1"))


# Singleton instance for convenient access
env = Environment()
