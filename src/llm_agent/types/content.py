"""
Provider‑neutral conversation types.

Blocks and messages are frozen: once a message is appended to the
conversation it is never altered. Everything provider‑specific lives in
adapters.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Iterable, Union

__all__ = [
    "Role",
    "TextBlock",
    "ToolUseBlock",
    "ToolResultBlock",
    "ContentBlock",
    "Message",
]


class Role(StrEnum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True, slots=True)
class TextBlock:
    """Plain text, from either the operator or the model."""
    text: str

    def as_dict(self) -> dict[str, Any]:
        return {"type": "text", "text": self.text}


@dataclass(frozen=True, slots=True)
class ToolUseBlock:
    """A model‑issued request to run a local tool."""
    id: str
    name: str
    input: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {"type": "tool_use", "id": self.id, "name": self.name, "input": self.input}


@dataclass(frozen=True, slots=True)
class ToolResultBlock:
    """Outcome of a ToolUseBlock; sent back to the model as user content."""
    tool_use_id: str            # must match the request id
    content: str
    is_error: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": "tool_result",
            "tool_use_id": self.tool_use_id,
            "content": self.content,
            "is_error": self.is_error,
        }


ContentBlock = Union[TextBlock, ToolUseBlock, ToolResultBlock]


@dataclass(frozen=True, slots=True)
class Message:
    """One entry of the conversation: a role and its ordered blocks."""

    role: Role
    blocks: tuple[ContentBlock, ...] = ()

    def __post_init__(self) -> None:
        # lists are accepted for convenience but never stored
        if not isinstance(self.blocks, tuple):
            object.__setattr__(self, "blocks", tuple(self.blocks))

    @classmethod
    def user_text(cls, text: str) -> "Message":
        return cls(Role.USER, (TextBlock(text),))

    @classmethod
    def assistant(cls, blocks: Iterable[ContentBlock]) -> "Message":
        return cls(Role.ASSISTANT, tuple(blocks))

    @classmethod
    def tool_results(cls, results: Iterable[ToolResultBlock]) -> "Message":
        """Results travel back to the model as user‑authored content."""
        return cls(Role.USER, tuple(results))

    def text_blocks(self) -> list[TextBlock]:
        return [b for b in self.blocks if isinstance(b, TextBlock)]

    def tool_uses(self) -> list[ToolUseBlock]:
        return [b for b in self.blocks if isinstance(b, ToolUseBlock)]

    def as_dict(self) -> dict[str, Any]:
        return {"role": self.role.value, "content": [b.as_dict() for b in self.blocks]}
