import os
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from services import gemini_client


def _fake_client(text: str | None = None, error: Exception | None = None):
    generate = AsyncMock()
    if error is not None:
        generate.side_effect = error
    else:
        generate.return_value = SimpleNamespace(text=text)
    return SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate)))


def _use_client(monkeypatch, client):
    monkeypatch.setattr(gemini_client, "get_client", lambda: client)


class TestGenerateJson:
    @pytest.mark.asyncio
    async def test_no_client_returns_none(self):
        assert await gemini_client.generate_json("prompt") is None

    @pytest.mark.asyncio
    async def test_parses_plain_json(self, monkeypatch):
        _use_client(monkeypatch, _fake_client('{"talentType": "Career Explorer"}'))
        assert await gemini_client.generate_json("prompt") == {"talentType": "Career Explorer"}

    @pytest.mark.asyncio
    async def test_strips_code_fences(self, monkeypatch):
        _use_client(monkeypatch, _fake_client('```json\n{"a": 1}\n```'))
        assert await gemini_client.generate_json("prompt") == {"a": 1}

    @pytest.mark.asyncio
    async def test_invalid_json_returns_none(self, monkeypatch):
        _use_client(monkeypatch, _fake_client("not json"))
        assert await gemini_client.generate_json("prompt") is None

    @pytest.mark.asyncio
    async def test_non_object_returns_none(self, monkeypatch):
        _use_client(monkeypatch, _fake_client("[1, 2]"))
        assert await gemini_client.generate_json("prompt") is None

    @pytest.mark.asyncio
    async def test_empty_response_returns_none(self, monkeypatch):
        _use_client(monkeypatch, _fake_client(None))
        assert await gemini_client.generate_json("prompt") is None

    @pytest.mark.asyncio
    async def test_api_error_returns_none(self, monkeypatch):
        _use_client(monkeypatch, _fake_client(error=RuntimeError("quota exceeded")))
        assert await gemini_client.generate_json("prompt") is None

    @pytest.mark.asyncio
    async def test_schema_is_forwarded(self, monkeypatch):
        client = _fake_client('{"a": 1}')
        _use_client(monkeypatch, client)
        schema = {"type": "OBJECT", "properties": {"a": {"type": "NUMBER"}}}
        await gemini_client.generate_json("prompt", schema)
        config = client.aio.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "application/json"
        assert config.response_schema is not None


class TestGenerateText:
    @pytest.mark.asyncio
    async def test_returns_stripped_text(self, monkeypatch):
        _use_client(monkeypatch, _fake_client("  - Grow revenue by 10%\n"))
        assert await gemini_client.generate_text("prompt") == "- Grow revenue by 10%"

    @pytest.mark.asyncio
    async def test_error_returns_none(self, monkeypatch):
        _use_client(monkeypatch, _fake_client(error=RuntimeError("boom")))
        assert await gemini_client.generate_text("prompt") is None


@pytest.mark.integration
@pytest.mark.skipif(not os.environ.get("GEMINI_API_KEY"), reason="GEMINI_API_KEY not set")
@pytest.mark.asyncio
async def test_live_generate_text():
    text = await gemini_client.generate_text("Reply with the single word: ready")
    assert text
