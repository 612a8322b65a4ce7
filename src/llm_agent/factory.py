from __future__ import annotations

import logging
from typing import Type

from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from llm_agent.providers import Provider, get_api_key
from llm_agent.providers.anthropic import AnthropicClient
from llm_agent.providers.base import BaseInferenceClient
from llm_agent.providers.gemini import GeminiClient
from llm_agent.providers.openai import OpenAIClient

# map Provider enum to its client implementation
_CLIENT_REGISTRY: dict[Provider, Type[BaseInferenceClient]] = {
    Provider.ANTHROPIC: AnthropicClient,
    Provider.OPENAI: OpenAIClient,
    Provider.GEMINI: GeminiClient,
}


def create_client(
    provider: Provider,
    *,
    api_key: str | None = None,
    client: AsyncOpenAI | AsyncAnthropic | None = None,
    logger: logging.Logger | None = None,
    **provider_kwargs: object,
) -> BaseInferenceClient:
    """
    Factory for creating any supported inference client.

    Args:
        provider: Which provider to use (ANTHROPIC, OPENAI, GEMINI).
        api_key: Overrides automatic lookup; if omitted, pulled from env.
        client: Optional pre-configured SDK client instance to use.
            - For Provider.ANTHROPIC: an AsyncAnthropic instance
            - For Provider.OPENAI and Provider.GEMINI: an AsyncOpenAI instance
        logger: Optional custom logger.
        **provider_kwargs: Any extra args to pass through (timeout, max_retries, base_url).
    """
    try:
        client_cls = _CLIENT_REGISTRY[Provider(provider)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unsupported provider: {provider}") from exc

    if client is not None:  # use caller‑supplied client verbatim
        return client_cls.from_client(client, logger=logger)

    key = api_key or get_api_key(Provider(provider))
    return client_cls(api_key=key, logger=logger, **provider_kwargs)
