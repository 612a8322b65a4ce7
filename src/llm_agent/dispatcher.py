"""
Tool dispatcher: runs one batch of tool calls and answers every one of them.

The batch is fanned out to concurrent workers and joined by index, so the
results always come back in request order whatever order the handlers finish
in. No handler failure, unknown name or timeout ever aborts the batch.
Handlers and the hook get their own copy of each call's input, so nothing
they do can change the logged tool_use block.
"""

from __future__ import annotations

import asyncio
import copy
import inspect
import json
import logging
from typing import Any, Callable, Optional, Sequence, cast

from llm_agent.errors import ToolNotFoundError
from llm_agent.registry import ToolRegistry
from llm_agent.types import ToolHandler, ToolResultBlock, ToolUseBlock

__all__ = ["ToolDispatcher", "ToolUseHook", "TOOL_NOT_FOUND", "MAX_TOOL_CONCURRENCY"]

TOOL_NOT_FOUND = "tool not found"
MAX_TOOL_CONCURRENCY = 10

ToolUseHook = Callable[[str, dict[str, Any]], None]


class ToolDispatcher:
    """Resolve tool calls against a registry and run them."""

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        on_tool_use: Optional[ToolUseHook] = None,
        timeout: Optional[float] = None,
        max_concurrency: int = MAX_TOOL_CONCURRENCY,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            registry: Where tool names are resolved.
            on_tool_use: Observer called with ``(name, input)`` for every
                resolved call, in request order, before the batch runs.
            timeout: Per-handler limit in seconds; None waits forever.
            max_concurrency: Upper bound on handlers running at once.
            logger: Optional custom logger.
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.registry = registry
        self.on_tool_use = on_tool_use
        self.timeout = timeout
        self.max_concurrency = max_concurrency
        self.logger = logger or logging.getLogger(__name__)

    async def execute_all(
        self, tool_uses: Sequence[ToolUseBlock]
    ) -> list[ToolResultBlock]:
        """Run a batch and return one result per call, in the same order."""
        if not tool_uses:
            return []

        resolved: list[Optional[ToolHandler]] = []
        for call in tool_uses:
            try:
                handler = self.registry.lookup(call.name)
            except ToolNotFoundError:
                self.logger.warning("Model requested unknown tool %r", call.name)
                handler = None
            resolved.append(handler)

        for call, handler in zip(tool_uses, resolved):
            if handler is not None:
                self._notify(call)

        self.logger.info("Dispatching %d tool call(s)", len(tool_uses))
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def execute_one(index: int) -> tuple[int, ToolResultBlock]:
            call, handler = tool_uses[index], resolved[index]
            if handler is None:
                return index, ToolResultBlock(call.id, TOOL_NOT_FOUND, is_error=True)
            async with semaphore:
                return index, await self._run(call, handler)

        joined = await asyncio.gather(*(execute_one(i) for i in range(len(tool_uses))))

        results: list[Optional[ToolResultBlock]] = [None] * len(tool_uses)
        for index, result in joined:
            results[index] = result
        # every index is filled exactly once by the join above
        return cast(list[ToolResultBlock], results)

    async def _run(self, call: ToolUseBlock, handler: ToolHandler) -> ToolResultBlock:
        try:
            output = await asyncio.wait_for(
                self._invoke(handler, copy.deepcopy(call.input)), self.timeout
            )
            if not isinstance(output, str):
                output = json.dumps(output)
        except asyncio.TimeoutError:
            self.logger.warning("Tool %s (%s) timed out after %ss", call.name, call.id, self.timeout)
            return ToolResultBlock(call.id, f"tool timed out after {self.timeout}s", is_error=True)
        except Exception as exc:
            self.logger.info("Tool %s (%s) failed: %s", call.name, call.id, exc)
            return ToolResultBlock(call.id, str(exc) or exc.__class__.__name__, is_error=True)

        return ToolResultBlock(call.id, output, is_error=False)

    @staticmethod
    async def _invoke(handler: ToolHandler, tool_input: dict[str, Any]) -> Any:
        if inspect.iscoroutinefunction(handler):
            return await handler(tool_input)
        # sync handlers would block the event loop
        result = await asyncio.to_thread(handler, tool_input)
        if inspect.isawaitable(result):
            result = await result
        return result

    def _notify(self, call: ToolUseBlock) -> None:
        if self.on_tool_use is None:
            return
        try:
            self.on_tool_use(call.name, copy.deepcopy(call.input))
        except Exception:
            self.logger.warning("on_tool_use hook failed for %s", call.name, exc_info=True)
