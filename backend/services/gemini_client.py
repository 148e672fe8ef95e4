"""Google Gemini API wrapper.

One call per request: the client is built without retry options, so a
failed call surfaces immediately instead of being billed twice.
"""

import logging

import httpx
from google import genai
from google.genai import errors, types

from config import settings
from services.errors import ConfigurationError, UnparsableResponse, UpstreamError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def require_client(client: genai.Client | None) -> genai.Client:
    if client is None:
        raise ConfigurationError("API key not configured")
    return client


def _first_text(response) -> str | None:
    """Text of the first part of the first candidate, if any."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = candidates[0].content
    parts = getattr(content, "parts", None) or []
    if not parts:
        return None
    return parts[0].text


async def generate_text(client: genai.Client, prompt: str, max_output_tokens: int) -> str:
    """Send one user prompt and return the model's raw answer text."""
    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(max_output_tokens=max_output_tokens),
        )
    except errors.APIError as e:
        logger.error("Gemini API error (%s): %s", e.code, e)
        details = getattr(e, "details", None)
        raise UpstreamError(e.code or 502, details if details is not None else str(e)) from e
    except httpx.HTTPError as e:
        # Never reached the model: DNS, connect or read timeout
        logger.error("Gemini transport error: %s", e)
        raise UpstreamError(502, f"{type(e).__name__}: {e}") from e

    text = _first_text(response)
    if not text:
        raise UnparsableResponse("Model response contained no text")
    return text
