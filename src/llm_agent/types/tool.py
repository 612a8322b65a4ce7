"""
Declarative tool descriptions.

Schemas are written out field by field next to each tool rather than derived
from classes, so what the model sees is exactly what was authored.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Protocol, Sequence, Union

__all__ = ["InputField", "ToolSpec", "ToolHandler"]


@dataclass(frozen=True, slots=True)
class InputField:
    """One property of a tool's input object."""
    name: str
    type: str                   # JSON‑schema type tag: "string", "integer", ...
    description: str = ""
    required: bool = True
    enum: Sequence[str] | None = None

    def as_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type}
        if self.description:
            schema["description"] = self.description
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        return schema


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """Name, description and input schema the model is told about."""
    name: str
    description: str
    fields: tuple[InputField, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ToolSpec.name must be a non-empty string")
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema for the tool input, always an object."""
        return {
            "type": "object",
            "properties": {f.name: f.as_schema() for f in self.fields},
            "required": [f.name for f in self.fields if f.required],
        }


class ToolHandler(Protocol):
    """Runs a tool. Raise to report failure; the message goes to the model."""

    def __call__(self, input: dict[str, Any]) -> Union[Any, Awaitable[Any]]: ...
