"""Anthropic adapter for pure request/response transformations."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from anthropic.types import Message as AnthropicMessage

from llm_agent.types import (
    ContentBlock,
    Message,
    TextBlock,
    ToolResultBlock,
    ToolSpec,
    ToolUseBlock,
)

_logger = logging.getLogger(__name__)


class AnthropicRequestAdapter:
    """Adapter for converting between conversation types and the Messages API."""

    def to_provider(
        self,
        messages: Sequence[Message],
        tools: Sequence[ToolSpec],
        *,
        max_tokens: int,
    ) -> dict[str, Any]:
        """Build Messages API request arguments (everything but ``model``)."""
        request: dict[str, Any] = {
            "max_tokens": max_tokens,
            "messages": [self.message_to_provider(m) for m in messages],
        }
        if tools:
            request["tools"] = [self.tool_to_provider(t) for t in tools]
        return request

    def message_to_provider(self, message: Message) -> dict[str, Any]:
        return {
            "role": message.role.value,
            "content": [self.block_to_provider(b) for b in message.blocks],
        }

    @staticmethod
    def block_to_provider(block: ContentBlock) -> dict[str, Any]:
        if isinstance(block, TextBlock):
            return {"type": "text", "text": block.text}
        if isinstance(block, ToolUseBlock):
            return {
                "type": "tool_use",
                "id": block.id,
                "name": block.name,
                "input": block.input,
            }
        if isinstance(block, ToolResultBlock):
            return {
                "type": "tool_result",
                "tool_use_id": block.tool_use_id,
                "content": block.content,
                "is_error": block.is_error,
            }
        raise TypeError(f"Unsupported content block: {type(block).__name__}")

    @staticmethod
    def tool_to_provider(spec: ToolSpec) -> dict[str, Any]:
        return {
            "name": spec.name,
            "description": spec.description,
            "input_schema": spec.input_schema,
        }

    def from_provider(self, raw: AnthropicMessage) -> list[ContentBlock]:
        """Convert an Anthropic response into ordered content blocks."""
        blocks: list[ContentBlock] = []
        for block in raw.content or []:
            if block.type == "text":
                blocks.append(TextBlock(block.text))
            elif block.type == "tool_use":
                blocks.append(
                    ToolUseBlock(
                        id=block.id,
                        name=block.name,
                        input=dict(block.input) if hasattr(block.input, "items") else {},
                    )
                )
            else:
                # thinking, server tool blocks, ...
                _logger.debug("Ignoring Anthropic content block of type %s", block.type)

        if getattr(raw, "stop_reason", None) == "max_tokens":
            _logger.warning("Anthropic response was cut off at max_tokens")
        return blocks
