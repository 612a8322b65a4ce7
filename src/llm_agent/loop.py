"""
The agent loop: turn-taking between the operator, the model and the tools.

    AWAITING_USER_INPUT --line--> INFERRING --text only--> AWAITING_USER_INPUT
            |                        |   ^
           EOF                tool use   | results
            v                        v   |
        TERMINATED <--error--   DISPATCHING_TOOLS

The operator is asked for input only once the model answers without
requesting any tool. Tool results go straight back to the model.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from llm_agent.config import AgentConfig
from llm_agent.console import DisplaySink, InputSource
from llm_agent.conversation import ConversationLog
from llm_agent.dispatcher import ToolDispatcher
from llm_agent.providers.base import InferenceClient
from llm_agent.registry import ToolRegistry
from llm_agent.types import Message, ToolUseBlock

__all__ = ["AgentLoop", "LoopState"]


class LoopState(Enum):
    AWAITING_USER_INPUT = "awaiting_user_input"
    INFERRING = "inferring"
    DISPATCHING_TOOLS = "dispatching_tools"
    TERMINATED = "terminated"


class AgentLoop:
    """
    Owns the conversation and drives one operator session to completion.

    Every collaborator is injected, so tests can swap the model for a
    scripted client and stdin for a scripted input source.
    """

    def __init__(
        self,
        client: InferenceClient,
        registry: ToolRegistry,
        input_source: InputSource,
        display: DisplaySink,
        config: Optional[AgentConfig] = None,
        *,
        dispatcher: Optional[ToolDispatcher] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or AgentConfig()
        self.logger = logger or logging.getLogger(__name__)
        self._client = client
        self._registry = registry
        self._input = input_source
        self._display = display
        self._dispatcher = dispatcher or ToolDispatcher(
            registry,
            on_tool_use=display.show_tool_use,
            timeout=self.config.tool_timeout,
            max_concurrency=self.config.max_concurrency,
        )
        self._conversation = ConversationLog()
        self._state = LoopState.AWAITING_USER_INPUT
        self._pending: list[ToolUseBlock] = []

    @property
    def conversation(self) -> ConversationLog:
        return self._conversation

    @property
    def state(self) -> LoopState:
        return self._state

    async def run(self) -> None:
        """
        Run until the input source is exhausted.

        Raises InferenceTransportError when the model cannot be reached; the
        conversation is left as it was before the failed call.
        """
        try:
            while self._state is not LoopState.TERMINATED:
                await self.step()
        finally:
            self._state = LoopState.TERMINATED
        self.logger.debug("Conversation ended after %d messages", len(self._conversation))

    async def step(self) -> LoopState:
        """Perform exactly one state transition and return the new state."""
        state = self._state
        try:
            if state is LoopState.AWAITING_USER_INPUT:
                self._state = self._read_input()
            elif state is LoopState.INFERRING:
                self._state = await self._infer()
            elif state is LoopState.DISPATCHING_TOOLS:
                self._state = await self._dispatch()
        except BaseException:
            self._state = LoopState.TERMINATED
            raise
        if state is not self._state:
            self.logger.debug("%s -> %s", state.name, self._state.name)
        return self._state

    def _read_input(self) -> LoopState:
        line, ok = self._input.read()
        if not ok:
            return LoopState.TERMINATED
        self._conversation.append(Message.user_text(line))
        return LoopState.INFERRING

    async def _infer(self) -> LoopState:
        blocks = await self._client.complete(
            self._conversation.snapshot(),
            self._registry.specs(),
            model=self.config.model,
            max_tokens=self.config.max_tokens,
        )
        if not blocks:
            # some providers reject an assistant turn with no content on the next request
            self.logger.warning("Model returned an empty reply")
        message = Message.assistant(blocks)
        self._conversation.append(message)

        for block in message.text_blocks():
            self._display.show_text(block.text)

        self._pending = message.tool_uses()
        if not self._pending:
            return LoopState.AWAITING_USER_INPUT
        return LoopState.DISPATCHING_TOOLS

    async def _dispatch(self) -> LoopState:
        results = await self._dispatcher.execute_all(self._pending)
        self._conversation.append(Message.tool_results(results))
        self._pending = []
        return LoopState.INFERRING
