"""Tests for the OpenAI-compatible translation client."""

from unittest.mock import MagicMock

import pytest
import requests

from common.errors import CredentialError, TranslationError
from translate.clients.openai_chat import OpenAIChatClient


def make_response(status_code: int = 200, payload=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} error", response=response
        )
    return response


@pytest.fixture
def client():
    client = OpenAIChatClient(api_key="sk-test", base_url="http://localhost:8000/v1/")
    client.session = MagicMock()
    return client


class TestOpenAIChatClient:
    """Tests for OpenAIChatClient."""

    def test_missing_key_is_credential_error(self):
        with pytest.raises(CredentialError):
            OpenAIChatClient(api_key=None)

    def test_from_env_without_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(CredentialError):
            OpenAIChatClient.from_env()

    def test_from_env_reads_settings(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("OPENAI_BASE_URL", "http://example.test/v1")
        monkeypatch.setenv("TRANSLATION_MODEL", "local-model")

        client = OpenAIChatClient.from_env()

        assert client.completions_url == "http://example.test/v1/chat/completions"
        assert client.model == "local-model"
        assert client.session.headers["Authorization"] == "Bearer sk-env"

    def test_translate_returns_stripped_content(self, client):
        client.session.post.return_value = make_response(
            payload={"choices": [{"message": {"content": "  Hello  "}}]}
        )

        assert client.translate("bonjour", "French", "English") == "Hello"

        url = client.session.post.call_args.args[0]
        payload = client.session.post.call_args.kwargs["json"]
        assert url == "http://localhost:8000/v1/chat/completions"
        assert payload["model"] == "gpt-4o-mini"
        assert payload["messages"][1] == {"role": "user", "content": "bonjour"}
        assert "French" in payload["messages"][0]["content"]
        assert "English" in payload["messages"][0]["content"]

    def test_null_content_is_empty_string(self, client):
        client.session.post.return_value = make_response(
            payload={"choices": [{"message": {"content": None}}]}
        )
        assert client.translate("bonjour", "French", "English") == ""

    def test_unauthorized_is_credential_error(self, client):
        client.session.post.return_value = make_response(status_code=401)
        with pytest.raises(CredentialError):
            client.translate("bonjour", "French", "English")

    @pytest.mark.parametrize("status_code", [403, 429, 500])
    def test_other_http_errors_are_translation_errors(self, client, status_code):
        client.session.post.return_value = make_response(status_code=status_code)
        with pytest.raises(TranslationError) as excinfo:
            client.translate("bonjour", "French", "English")
        assert not isinstance(excinfo.value, CredentialError)

    def test_network_error(self, client):
        client.session.post.side_effect = requests.exceptions.ConnectionError("down")
        with pytest.raises(TranslationError):
            client.translate("bonjour", "French", "English")

    def test_timeout(self, client):
        client.session.post.side_effect = requests.exceptions.Timeout()
        with pytest.raises(TranslationError):
            client.translate("bonjour", "French", "English")

    def test_unexpected_payload(self, client):
        client.session.post.return_value = make_response(payload={"error": "nope"})
        with pytest.raises(TranslationError):
            client.translate("bonjour", "French", "English")
