"""Tests for the ChatGPT adapter."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest
import pytest_asyncio

from satyata.domain.errors import ConfigurationError, ProviderUnavailableError
from satyata.infrastructure.ai.chatgpt_adapter import ChatGPTAdapter, ChatGPTConfig


def completion(content):
    """Build a chat completion shaped like the OpenAI SDK response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest_asyncio.fixture
async def adapter():
    """Adapter with a mocked OpenAI client."""
    adapter = ChatGPTAdapter(ChatGPTConfig(api_key="sk-test"))
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion('{"decision": "true"}'))
    client.close = AsyncMock()
    adapter._client = client
    adapter._initialized = True
    yield adapter
    await adapter.shutdown()


@pytest.mark.asyncio
async def test_complete_json_request(adapter):
    """Test that the request uses JSON mode and the configured sampling."""
    raw = await adapter.complete_json("system text", "user text")

    assert raw == '{"decision": "true"}'
    adapter._client.chat.completions.create.assert_awaited_once_with(
        model="gpt-4o",
        messages=[
            {"role": "system", "content": "system text"},
            {"role": "user", "content": "user text"},
        ],
        temperature=0.3,
        max_tokens=1000,
        response_format={"type": "json_object"},
    )


@pytest.mark.asyncio
async def test_complete_json_empty_content(adapter):
    adapter._client.chat.completions.create.return_value = completion(None)

    assert await adapter.complete_json("s", "u") == ""


@pytest.mark.asyncio
async def test_complete_json_no_choices(adapter):
    adapter._client.chat.completions.create.return_value = SimpleNamespace(choices=[])

    assert await adapter.complete_json("s", "u") == ""


@pytest.mark.asyncio
async def test_api_error_maps_to_provider_unavailable(adapter):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    adapter._client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

    with pytest.raises(ProviderUnavailableError) as exc_info:
        await adapter.complete_json("s", "u")

    assert exc_info.value.provider == "ChatGPT"


@pytest.mark.asyncio
async def test_shutdown_closes_client(adapter):
    client = adapter._client

    await adapter.shutdown()

    client.close.assert_awaited_once()
    assert not adapter.is_available


@pytest.mark.asyncio
@pytest.mark.parametrize("api_key", ["", "your_openai_api_key_here"])
async def test_initialize_without_key(api_key):
    adapter = ChatGPTAdapter(ChatGPTConfig(api_key=api_key))

    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        await adapter.initialize()
    assert not adapter.is_available


def test_provider_metadata():
    adapter = ChatGPTAdapter(ChatGPTConfig(api_key="sk-test"))

    assert adapter.provider_name == "ChatGPT"
    assert adapter.capabilities["json_mode"]
    assert not adapter.is_available
