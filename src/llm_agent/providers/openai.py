from __future__ import annotations

import logging
from typing import Any, Optional, Self

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion

from llm_agent.adapters import OpenAIRequestAdapter

from .base import BaseInferenceClient, RequestAdapter


class OpenAIClient(BaseInferenceClient):
    """
    OpenAI Chat Completions client (async‑only).

    Use ``OpenAIClient.from_client`` when you already have an ``AsyncOpenAI`` instance.
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
        self._client = AsyncOpenAI(
            api_key=api_key,
            timeout=timeout,
            max_retries=max_retries,
            base_url=base_url,
        )
        self._adapter = OpenAIRequestAdapter()

    @classmethod
    def from_client(
        cls,
        client: AsyncOpenAI,
        *,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
    ) -> Self:
        """
        Build an ``OpenAIClient`` around an already‑configured ``AsyncOpenAI`` client.
        """
        if not isinstance(client, AsyncOpenAI):
            raise TypeError(
                f"{cls.__name__}.from_client expects AsyncOpenAI; got {type(client).__name__}"
            )

        self = cls.__new__(cls)  # bypass __init__
        BaseInferenceClient.__init__(self, logger=logger, name=name)
        self._client = client
        self._adapter = OpenAIRequestAdapter()
        return self

    @property
    def adapter(self) -> RequestAdapter:
        return self._adapter

    async def _complete_impl(self, model: str, request: dict[str, Any]) -> ChatCompletion:
        response: ChatCompletion = await self._client.chat.completions.create(
            model=model, **request
        )
        return response
