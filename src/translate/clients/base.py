"""Abstract base class for translation clients."""

from abc import ABC, abstractmethod

from common.errors import CredentialError, TranslationError

__all__ = ["TranslationClient", "TranslationError", "CredentialError"]


class TranslationClient(ABC):
    """Capability the translator depends on.

    Implementations translate one piece of text per call. The translator
    never talks to a network service directly, so tests can substitute a
    deterministic client.
    """

    @abstractmethod
    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Translate a single text.

        Args:
            text: Text to translate
            source_language: Language the text is written in
            target_language: Language to translate into

        Returns:
            Translated text (may be empty if the service returned nothing)

        Raises:
            TranslationError: If this call failed
            CredentialError: If the service rejected the credential
        """
        pass
