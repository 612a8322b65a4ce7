"""Append‑only conversation log."""

from __future__ import annotations

import json
from typing import Iterator

from llm_agent.types import Message

__all__ = ["ConversationLog"]


class ConversationLog:
    """
    Ordered ledger of messages. Nothing is ever removed, reordered or edited;
    the agent loop is the only writer and carries all policy.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def append(self, message: Message) -> None:
        if not isinstance(message, Message):
            raise TypeError(
                f"ConversationLog.append expects Message; got {type(message).__name__}"
            )
        self._messages.append(message)

    def snapshot(self) -> tuple[Message, ...]:
        """Return the current history for one inference call."""
        return tuple(self._messages)

    def transcript(self) -> str:
        """Deterministic JSON rendering of the whole log."""
        return json.dumps(
            [m.as_dict() for m in self._messages],
            sort_keys=True,
            indent=2,
            ensure_ascii=False,
        )

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(messages={len(self._messages)})"
