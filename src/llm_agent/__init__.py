"""
llm-agent - a tool-using conversation loop for LLMs.
"""

import logging

from .config import AgentConfig
from .console import ConsoleDisplay, ScriptedInputSource, StdinInputSource
from .conversation import ConversationLog
from .dispatcher import ToolDispatcher
from .errors import (
    AgentError,
    ConfigurationError,
    DuplicateToolNameError,
    InferenceTransportError,
    ToolExecutionError,
    ToolNotFoundError,
)
from .factory import create_client
from .loop import AgentLoop, LoopState
from .providers import Provider, get_api_key
from .registry import ToolRegistry
from .types import (
    InputField,
    Message,
    Role,
    TextBlock,
    ToolResultBlock,
    ToolSpec,
    ToolUseBlock,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AgentLoop",
    "LoopState",
    "AgentConfig",
    "ConversationLog",
    "ToolRegistry",
    "ToolDispatcher",
    "ConsoleDisplay",
    "StdinInputSource",
    "ScriptedInputSource",
    "create_client",
    "Provider",
    "get_api_key",
    "Message",
    "Role",
    "TextBlock",
    "ToolUseBlock",
    "ToolResultBlock",
    "ToolSpec",
    "InputField",
    "AgentError",
    "ConfigurationError",
    "DuplicateToolNameError",
    "InferenceTransportError",
    "ToolExecutionError",
    "ToolNotFoundError",
]
