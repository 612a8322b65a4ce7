"""Tool registry: exact name → (spec, handler), filled once at startup."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from llm_agent.errors import DuplicateToolNameError, ToolNotFoundError
from llm_agent.types import ToolHandler, ToolSpec

__all__ = ["ToolRegistry"]


class ToolRegistry:
    """
    Explicit mapping from tool name to its handler.

    Lookup is exact and case‑sensitive. Nothing mutates the registry after the
    loop starts, so concurrent dispatch workers read it without locking.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._specs: dict[str, ToolSpec] = {}
        self._handlers: dict[str, ToolHandler] = {}

    @classmethod
    def from_tools(
        cls,
        tools: Iterable[tuple[ToolSpec, ToolHandler]],
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "ToolRegistry":
        registry = cls(logger=logger)
        for spec, handler in tools:
            registry.register(spec, handler)
        return registry

    def register(self, spec: ToolSpec, handler: ToolHandler) -> None:
        if spec.name in self._specs:
            raise DuplicateToolNameError(spec.name)
        if not callable(handler):
            raise TypeError(f"handler for tool {spec.name!r} is not callable")
        self._specs[spec.name] = spec
        self._handlers[spec.name] = handler
        self.logger.debug("Registered tool %s", spec.name)

    def lookup(self, name: str) -> ToolHandler:
        try:
            return self._handlers[name]
        except KeyError:
            raise ToolNotFoundError(name) from None

    def specs(self) -> tuple[ToolSpec, ...]:
        """Registered specs, in registration order."""
        return tuple(self._specs.values())

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._specs)
