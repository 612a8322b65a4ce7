"""Inference client interface and shared base class."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, Sequence

from llm_agent.errors import classify_error
from llm_agent.types import ContentBlock, Message, ToolSpec

__all__ = ["InferenceClient", "RequestAdapter", "BaseInferenceClient"]


class InferenceClient(Protocol):
    """What the agent loop needs from a model backend."""

    async def complete(
        self,
        history: Sequence[Message],
        tools: Sequence[ToolSpec],
        *,
        model: str,
        max_tokens: int,
    ) -> list[ContentBlock]:
        """Return the model's reply blocks or raise InferenceTransportError."""
        ...


class RequestAdapter(Protocol):
    """Protocol for adapting conversation types to a provider-specific format."""

    def to_provider(
        self,
        messages: Sequence[Message],
        tools: Sequence[ToolSpec],
        *,
        max_tokens: int,
    ) -> dict[str, Any]:
        """Convert history and tool specs to provider request arguments."""
        ...

    def from_provider(self, raw: Any) -> list[ContentBlock]:
        """Convert a provider response to ordered content blocks."""
        ...


class BaseInferenceClient(ABC):
    """
    Base class for SDK-backed inference clients. All implementations are async.
    """

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Initializes the base client.

        Args:
            logger: Optional logger instance. If None, a logger named after
                    this module will be used.
            name: Optional name for this component, used in logging.
                  If None, defaults to the concrete class's name.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.name = name if name is not None else self.__class__.__name__

    @property
    @abstractmethod
    def adapter(self) -> RequestAdapter:
        """Request adapter for this provider."""
        ...

    @abstractmethod
    async def _complete_impl(self, model: str, request: dict[str, Any]) -> Any:
        """
        Send one non-streaming request and return the raw provider response.

        Args:
            model: Model identifier, passed through untouched.
            request: Provider request arguments built by the adapter.
        """
        ...

    async def complete(
        self,
        history: Sequence[Message],
        tools: Sequence[ToolSpec],
        *,
        model: str,
        max_tokens: int,
    ) -> list[ContentBlock]:
        """
        Send the conversation and return the reply blocks.

        Any SDK or translation failure is wrapped in InferenceTransportError.
        Cancellation is not caught.
        """
        try:
            request = self.adapter.to_provider(history, tools, max_tokens=max_tokens)
            self._log(
                f"Sending request to model {model} "
                f"({len(history)} messages, {len(tools)} tools)"
            )
            raw = await self._complete_impl(model, request)
            return self.adapter.from_provider(raw)
        except Exception as exc:
            raise classify_error(exc, self.logger) from exc

    def _log(self, message: str, level: int = logging.INFO) -> None:
        self.logger.log(level, f"[{self.name}] {message}")

    # --- lifecycle ---------------------------------------------------------
    async def aclose(self) -> None:
        """
        Close the underlying SDK client. Safe to call multiple times.
        """
        client = getattr(self, "_client", None)
        close = getattr(client, "close", None)
        if close:
            await close()

    async def __aenter__(self) -> "BaseInferenceClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
