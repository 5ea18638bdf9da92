"""Translation client for OpenAI-compatible chat-completions APIs."""

import requests

from common.env import env
from common.logger import get_logger

from .base import CredentialError, TranslationClient, TranslationError

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a professional translator. Translate the following text from "
    "{source_language} to {target_language}. Reply with the translation only, "
    "without explanations or additional context."
)


class OpenAIChatClient(TranslationClient):
    """Translates one text per request through ``POST /chat/completions``.

    Works against api.openai.com or any server exposing the same API
    (vLLM, LM Studio, etc.) through ``base_url``.
    """

    DEFAULT_MODEL = "gpt-4o-mini"

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.openai.com/v1",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.3,
        max_tokens: int = 200,
        timeout: float = 30,
    ):
        """Initialize the client.

        Args:
            api_key: Bearer token for the API
            base_url: API root, without the trailing ``/chat/completions``
            model: Chat model name
            temperature: Sampling temperature
            max_tokens: Upper bound on the reply length
            timeout: Per-request timeout in seconds

        Raises:
            CredentialError: If no API key was given
        """
        if not api_key:
            raise CredentialError(
                "OPENAI_API_KEY environment variable is not set. "
                "Please set it before running the translator."
            )

        self.completions_url = f"{base_url.rstrip('/')}/chat/completions"
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            }
        )

    @classmethod
    def from_env(cls) -> "OpenAIChatClient":
        """Build a client from OPENAI_API_KEY, OPENAI_BASE_URL and TRANSLATION_MODEL."""
        return cls(
            api_key=env.openai_api_key(),
            base_url=env.openai_base_url(),
            model=env.translation_model(),
        )

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Translate a single text.

        Raises:
            CredentialError: On HTTP 401 (the key is wrong for every request)
            TranslationError: On any other HTTP, network or payload error
        """
        payload = {
            "model": self.model,
            "messages": [
                {
                    "role": "system",
                    "content": SYSTEM_PROMPT.format(
                        source_language=source_language,
                        target_language=target_language,
                    ),
                },
                {"role": "user", "content": text},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        try:
            response = self.session.post(self.completions_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            raise TranslationError(f"Translation request timed out for '{text}'") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status == 401:
                raise CredentialError("Translation service rejected the API key") from e
            if status == 429:
                raise TranslationError("Translation service rate limit or quota exceeded") from e
            raise TranslationError(f"Translation API error: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TranslationError(f"Translation API error: {e}") from e
        except ValueError as e:
            raise TranslationError("Translation API returned invalid JSON") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise TranslationError("Unexpected translation API response shape") from e

        logger.debug(f"Model {data.get('model', self.model)} answered for '{text}'")
        return (content or "").strip()
