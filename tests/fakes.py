"""Test doubles for the agent loop's collaborators."""

from __future__ import annotations

from typing import Any, Sequence

from llm_agent.types import ContentBlock, Message, ToolSpec


class ScriptedInferenceClient:
    """
    Replays fixed responses in order and records every request.

    A response may be a list of blocks or an exception instance to raise.
    """

    def __init__(self, responses: Sequence[list[ContentBlock] | BaseException]) -> None:
        self._responses = list(responses)
        self.requests: list[dict[str, Any]] = []

    async def complete(
        self,
        history: Sequence[Message],
        tools: Sequence[ToolSpec],
        *,
        model: str,
        max_tokens: int,
    ) -> list[ContentBlock]:
        self.requests.append(
            {
                "history": tuple(history),
                "tools": tuple(tools),
                "model": model,
                "max_tokens": max_tokens,
            }
        )
        if not self._responses:
            raise AssertionError("ScriptedInferenceClient ran out of responses")
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return list(response)

    @property
    def calls(self) -> int:
        return len(self.requests)


class RecordingDisplay:
    """Keeps every display event in order as ("text", ...) / ("tool", ...)."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def show_text(self, text: str) -> None:
        self.events.append(("text", text))

    def show_tool_use(self, name: str, input: dict[str, Any]) -> None:
        self.events.append(("tool", name, input))

    @property
    def texts(self) -> list[str]:
        return [e[1] for e in self.events if e[0] == "text"]
