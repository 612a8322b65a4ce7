"""OpenAI adapter for pure request/response transformations."""

from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from openai.types.chat import ChatCompletion

from llm_agent.types import (
    ContentBlock,
    Message,
    Role,
    TextBlock,
    ToolResultBlock,
    ToolSpec,
    ToolUseBlock,
)

_logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "


class OpenAIRequestAdapter:
    """Adapter for converting between conversation types and Chat Completions."""

    def to_provider(
        self,
        messages: Sequence[Message],
        tools: Sequence[ToolSpec],
        *,
        max_tokens: int,
    ) -> dict[str, Any]:
        """Build Chat Completions request arguments (everything but ``model``)."""
        openai_messages: list[dict[str, Any]] = []
        for message in messages:
            openai_messages.extend(self.message_to_provider(message))

        request: dict[str, Any] = {
            "max_tokens": max_tokens,
            "messages": openai_messages,
        }
        if tools:
            request["tools"] = [self.tool_to_provider(t) for t in tools]
        return request

    def message_to_provider(self, message: Message) -> list[dict[str, Any]]:
        """
        One conversation message can expand to several OpenAI messages:
        every tool result travels as its own ``tool`` message.
        """
        text = "".join(b.text for b in message.text_blocks())

        if message.role is Role.ASSISTANT:
            openai_msg: dict[str, Any] = {"role": "assistant", "content": text}
            tool_uses = message.tool_uses()
            if tool_uses:
                openai_msg["tool_calls"] = [
                    {
                        "id": call.id,
                        "type": "function",
                        "function": {
                            "name": call.name,
                            "arguments": json.dumps(call.input),
                        },
                    }
                    for call in tool_uses
                ]
                # OpenAI spec: content should be null when tool_calls is present
                if not text:
                    openai_msg["content"] = None
            return [openai_msg]

        out: list[dict[str, Any]] = []
        for block in message.blocks:
            if isinstance(block, ToolResultBlock):
                content = block.content
                if block.is_error:
                    content = ERROR_PREFIX + content
                out.append(
                    {"role": "tool", "tool_call_id": block.tool_use_id, "content": content}
                )
        if text or not out:
            out.append({"role": "user", "content": text})
        return out

    @staticmethod
    def tool_to_provider(spec: ToolSpec) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": spec.name,
                "description": spec.description,
                "parameters": spec.input_schema,
            },
        }

    def from_provider(self, raw: ChatCompletion) -> list[ContentBlock]:
        """Convert an OpenAI response into ordered content blocks."""
        blocks: list[ContentBlock] = []
        if not raw.choices or not raw.choices[0].message:
            return blocks

        message = raw.choices[0].message
        if message.content:
            blocks.append(TextBlock(message.content))

        for tc in message.tool_calls or []:
            raw_args = tc.function.arguments
            arguments: dict[str, Any] = {}  # Default to empty dict

            if isinstance(raw_args, dict):
                arguments = raw_args
            elif isinstance(raw_args, str) and raw_args.strip():
                try:
                    decoded = json.loads(raw_args)
                except json.JSONDecodeError as exc:
                    # the handler rejects the empty input and the model hears about it
                    _logger.warning(f"Bad JSON in tool call: {raw_args}", exc_info=exc)
                else:
                    if isinstance(decoded, dict):
                        arguments = decoded

            blocks.append(ToolUseBlock(id=tc.id, name=tc.function.name, input=arguments))

        return blocks
