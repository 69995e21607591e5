"""Tests for the AI provider factory."""

from typing import Dict

import pytest

from satyata.domain.errors import ConfigurationError
from satyata.infrastructure.ai.chatgpt_adapter import ChatGPTAdapter
from satyata.infrastructure.ai.factory import AIProviderFactory, build_chatgpt


class StubProvider:
    """Minimal AI provider."""

    def __init__(self, answer: str = "{}"):
        self.answer = answer
        self._initialized = False

    async def initialize(self) -> None:
        self._initialized = True

    async def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        return self.answer

    async def shutdown(self) -> None:
        self._initialized = False

    @property
    def provider_name(self) -> str:
        return "Stub"

    @property
    def is_available(self) -> bool:
        return self._initialized

    @property
    def capabilities(self) -> Dict[str, bool]:
        return {}


@pytest.fixture
def factory():
    return AIProviderFactory()


def test_default_registration(factory):
    assert factory.available_providers == {"chatgpt": False}


@pytest.mark.asyncio
async def test_create_registered_provider(factory):
    factory.register_provider("stub", StubProvider)

    provider = await factory.create_provider("stub", answer='{"ok": true}')

    assert provider.is_available
    assert await provider.complete_json("s", "u") == '{"ok": true}'
    assert factory.get_provider("stub") is provider
    assert await factory.create_provider("stub") is provider
    assert factory.available_providers["stub"]


@pytest.mark.asyncio
async def test_unknown_provider(factory):
    with pytest.raises(ValueError, match="not found"):
        await factory.create_provider("unknown")


@pytest.mark.asyncio
async def test_chatgpt_reads_environment(factory, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")

    provider = await factory.create_provider("chatgpt")

    try:
        assert isinstance(provider, ChatGPTAdapter)
        assert provider._config.model == "gpt-4o-mini"
        assert provider.is_available
    finally:
        await factory.shutdown()


@pytest.mark.asyncio
async def test_chatgpt_without_key_is_not_cached(factory, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ConfigurationError):
        await factory.create_provider("chatgpt")

    assert factory.get_provider("chatgpt") is None


@pytest.mark.asyncio
async def test_shutdown_clears_instances(factory):
    factory.register_provider("stub", StubProvider)
    provider = await factory.create_provider("stub")

    await factory.shutdown()

    assert not provider.is_available
    assert factory.get_provider("stub") is None


def test_build_chatgpt_overrides_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.delenv("OPENAI_MODEL", raising=False)

    adapter = build_chatgpt(api_key="sk-explicit", temperature=0.1)

    assert adapter._config.api_key == "sk-explicit"
    assert adapter._config.model == "gpt-4o"
    assert adapter._config.temperature == 0.1
