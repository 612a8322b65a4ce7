from .content import (
    Role,
    TextBlock,
    ToolUseBlock,
    ToolResultBlock,
    ContentBlock,
    Message,
)
from .tool import InputField, ToolSpec, ToolHandler

__all__ = [
    "Role",
    "TextBlock",
    "ToolUseBlock",
    "ToolResultBlock",
    "ContentBlock",
    "Message",
    "InputField",
    "ToolSpec",
    "ToolHandler",
]
