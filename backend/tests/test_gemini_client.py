from unittest.mock import patch

import httpx
import pytest
from google.genai import errors

from config import settings
from services import gemini_client
from services.errors import ConfigurationError, UnparsableResponse, UpstreamError
from fakes import FakeGeminiClient


@pytest.fixture
def no_cached_client():
    gemini_client._client = None
    yield
    gemini_client._client = None


def test_get_client_without_key(monkeypatch, no_cached_client):
    monkeypatch.setattr(settings, "gemini_api_key", "")
    with patch("services.gemini_client.genai.Client") as factory:
        assert gemini_client.get_client() is None
    factory.assert_not_called()


def test_get_client_is_cached(monkeypatch, no_cached_client):
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    with patch("services.gemini_client.genai.Client") as factory:
        first = gemini_client.get_client()
        second = gemini_client.get_client()
    assert first is second
    factory.assert_called_once_with(api_key="test-key")


def test_require_client():
    with pytest.raises(ConfigurationError) as exc:
        gemini_client.require_client(None)
    assert exc.value.status_code == 500
    fake = FakeGeminiClient()
    assert gemini_client.require_client(fake) is fake


@pytest.mark.asyncio
async def test_generate_text_returns_first_part():
    client = FakeGeminiClient(text="hello")
    assert await gemini_client.generate_text(client, "prompt", 64) == "hello"
    call = client.calls[0]
    assert call["model"] == settings.gemini_model
    assert call["contents"] == "prompt"
    assert call["config"].max_output_tokens == 64


@pytest.mark.asyncio
async def test_generate_text_without_candidates():
    with pytest.raises(UnparsableResponse):
        await gemini_client.generate_text(FakeGeminiClient(text=None), "prompt", 64)


@pytest.mark.asyncio
async def test_timeout_becomes_upstream_error():
    client = FakeGeminiClient(error=httpx.ReadTimeout("timed out"))
    with pytest.raises(UpstreamError) as exc:
        await gemini_client.generate_text(client, "prompt", 64)
    assert exc.value.status_code == 502
    assert exc.value.details == "ReadTimeout: timed out"


@pytest.mark.asyncio
async def test_server_error_keeps_status_and_body():
    body = {"error": {"code": 503, "message": "The model is overloaded.", "status": "UNAVAILABLE"}}
    client = FakeGeminiClient(error=errors.ServerError(503, body))
    with pytest.raises(UpstreamError) as exc:
        await gemini_client.generate_text(client, "prompt", 64)
    assert exc.value.status_code == 503
    assert exc.value.to_body() == {"error": "Model API error", "details": body}
