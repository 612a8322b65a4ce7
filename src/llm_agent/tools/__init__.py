"""Built-in tools."""

from __future__ import annotations

import logging
from typing import Optional

from llm_agent.registry import ToolRegistry

from .files import EDIT_FILE, FILE_TOOLS, LIST_FILES, READ_FILE, edit_file, list_files, read_file

__all__ = [
    "default_registry",
    "FILE_TOOLS",
    "READ_FILE",
    "LIST_FILES",
    "EDIT_FILE",
    "read_file",
    "list_files",
    "edit_file",
]


def default_registry(*, logger: Optional[logging.Logger] = None) -> ToolRegistry:
    """Registry holding the file tools."""
    return ToolRegistry.from_tools(FILE_TOOLS, logger=logger)
