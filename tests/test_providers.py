"""Tests for SDK-backed inference clients and the client factory."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from llm_agent.errors import ConfigurationError, InferenceTransportError
from llm_agent.factory import create_client
from llm_agent.providers import Provider, get_api_key
from llm_agent.providers.anthropic import AnthropicClient
from llm_agent.providers.gemini import GeminiClient
from llm_agent.providers.openai import OpenAIClient
from llm_agent.types import Message, TextBlock, ToolUseBlock
from llm_agent.tools import READ_FILE


@pytest.fixture
def anthropic_client(monkeypatch):
    sdk = AsyncAnthropic(api_key="test-key")
    create = AsyncMock()
    monkeypatch.setattr(sdk.messages, "create", create)
    return AnthropicClient.from_client(sdk), create


class TestAnthropicClient:
    async def test_complete_sends_request_and_converts_reply(self, anthropic_client):
        client, create = anthropic_client
        create.return_value = SimpleNamespace(
            stop_reason="tool_use",
            content=[
                SimpleNamespace(type="text", text="Reading."),
                SimpleNamespace(type="tool_use", id="tu_1", name="read_file", input={"path": "a"}),
            ],
        )

        blocks = await client.complete(
            [Message.user_text("read a")], [READ_FILE], model="claude-test", max_tokens=99
        )

        assert blocks == [TextBlock("Reading."), ToolUseBlock("tu_1", "read_file", {"path": "a"})]
        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "claude-test"
        assert kwargs["max_tokens"] == 99
        assert kwargs["tools"][0]["name"] == "read_file"

    async def test_sdk_failure_is_wrapped(self, anthropic_client):
        client, create = anthropic_client
        original = ConnectionError("network down")
        create.side_effect = original

        with pytest.raises(InferenceTransportError) as excinfo:
            await client.complete([Message.user_text("hi")], [], model="m", max_tokens=1)

        assert excinfo.value.original_exc is original
        assert excinfo.value.__cause__ is original
        assert "Connection problem" in str(excinfo.value)

    async def test_malformed_reply_is_wrapped(self, anthropic_client):
        client, create = anthropic_client
        create.return_value = object()

        with pytest.raises(InferenceTransportError):
            await client.complete([Message.user_text("hi")], [], model="m", max_tokens=1)

    def test_from_client_type_check(self):
        with pytest.raises(TypeError):
            AnthropicClient.from_client(AsyncOpenAI(api_key="x"))  # type: ignore[arg-type]


class TestOpenAIClient:
    async def test_complete(self, monkeypatch):
        sdk = AsyncOpenAI(api_key="test-key")
        create = AsyncMock(
            return_value=SimpleNamespace(
                choices=[SimpleNamespace(message=SimpleNamespace(content="hello", tool_calls=None))]
            )
        )
        monkeypatch.setattr(sdk.chat.completions, "create", create)
        client = OpenAIClient.from_client(sdk)

        blocks = await client.complete([Message.user_text("hi")], [], model="gpt-test", max_tokens=5)

        assert blocks == [TextBlock("hello")]
        assert create.call_args.kwargs["model"] == "gpt-test"
        assert create.call_args.kwargs["messages"] == [{"role": "user", "content": "hi"}]

    def test_gemini_uses_openai_compatible_endpoint(self):
        client = GeminiClient(api_key="test-key")
        assert "generativelanguage.googleapis.com" in str(client._client.base_url)


class TestFactory:
    def test_wraps_supplied_client(self):
        sdk = AsyncAnthropic(api_key="k")
        client = create_client(Provider.ANTHROPIC, client=sdk)
        assert isinstance(client, AnthropicClient)
        assert client._client is sdk

    def test_accepts_provider_string(self):
        assert isinstance(create_client("openai", api_key="k"), OpenAIClient)

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            create_client("mystery", api_key="k")  # type: ignore[arg-type]

    def test_missing_key(self, monkeypatch):
        monkeypatch.setattr("llm_agent.providers.load_dotenv", lambda: False)
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            get_api_key(Provider.GEMINI)

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setattr("llm_agent.providers.load_dotenv", lambda: False)
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        assert get_api_key(Provider.ANTHROPIC) == "sk-test"

    async def test_async_context_manager_closes_sdk_client(self, monkeypatch):
        sdk = AsyncAnthropic(api_key="k")
        close = AsyncMock()
        monkeypatch.setattr(sdk, "close", close)
        async with create_client(Provider.ANTHROPIC, client=sdk):
            pass
        close.assert_awaited_once()
