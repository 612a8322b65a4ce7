from __future__ import annotations

import logging
from typing import Any, Optional, Self

from anthropic import AsyncAnthropic
from anthropic.types import Message as AnthropicMessage

from llm_agent.adapters import AnthropicRequestAdapter

from .base import BaseInferenceClient, RequestAdapter


class AnthropicClient(BaseInferenceClient):
    """
    Anthropic Messages API client (async‑only).

    Use ``AnthropicClient.from_client`` when you already have an ``AsyncAnthropic`` instance.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout: float = 60.0,
        max_retries: int = 2,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> None:
        super().__init__(logger=logger, name=name)
        self._client = AsyncAnthropic(
            api_key=api_key,
            timeout=timeout,
            max_retries=max_retries,
            base_url=base_url,
        )
        self._adapter = AnthropicRequestAdapter()

    @classmethod
    def from_client(
        cls,
        client: AsyncAnthropic,
        *,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
    ) -> Self:
        """
        Wrap an existing ``AsyncAnthropic`` client.
        """
        if not isinstance(client, AsyncAnthropic):
            raise TypeError(
                f"AnthropicClient.from_client expects AsyncAnthropic; got {type(client).__name__}"
            )

        self = cls.__new__(cls)  # bypass __init__
        BaseInferenceClient.__init__(self, logger=logger, name=name)
        self._client = client
        self._adapter = AnthropicRequestAdapter()
        return self

    @property
    def adapter(self) -> RequestAdapter:
        return self._adapter

    async def _complete_impl(self, model: str, request: dict[str, Any]) -> AnthropicMessage:
        response: AnthropicMessage = await self._client.messages.create(model=model, **request)
        self._log(
            f"Anthropic replied (stop_reason={response.stop_reason})", logging.DEBUG
        )
        return response
