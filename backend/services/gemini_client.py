"""Google Gemini API wrapper with error handling.

Callers get None back on any failure and are expected to fall back to a
deterministic result.
"""

import json
import logging

from google import genai
from google.genai import types

from config import settings

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


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def _generate(prompt: str, config: types.GenerateContentConfig) -> str | None:
    client = get_client()
    if client is None:
        return None

    response = await client.aio.models.generate_content(
        model=settings.gemini_model,
        contents=prompt,
        config=config,
    )
    return (response.text or "").strip()


async def generate_json(prompt: str, schema: dict | None = None) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response."""
    config = types.GenerateContentConfig(
        temperature=settings.gemini_temperature,
        max_output_tokens=settings.gemini_max_output_tokens,
        response_mime_type="application/json",
        response_schema=schema,
    )
    try:
        text = await _generate(prompt, config)
        if text is None:
            return None
        if not text:
            logger.error("Empty response from Gemini API")
            return None

        data = json.loads(_strip_code_fences(text))
        if not isinstance(data, dict):
            logger.error("Gemini returned JSON %s, expected an object", type(data).__name__)
            return None
        return data

    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None


async def generate_text(prompt: str) -> str | None:
    """Send a prompt to Gemini and return the plain-text response."""
    config = types.GenerateContentConfig(
        temperature=settings.gemini_temperature,
        max_output_tokens=settings.gemini_max_output_tokens,
    )
    try:
        text = await _generate(prompt, config)
        return text or None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None
