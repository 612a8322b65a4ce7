"""
File-system tools: read, list and edit files relative to the working directory.

Inputs are validated with pydantic; a malformed call fails that one call and
the error text goes back to the model.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from llm_agent.errors import ToolExecutionError
from llm_agent.types import InputField, ToolSpec

__all__ = [
    "READ_FILE",
    "LIST_FILES",
    "EDIT_FILE",
    "read_file",
    "list_files",
    "edit_file",
    "FILE_TOOLS",
]


class ReadFileInput(BaseModel):
    path: str


class ListFilesInput(BaseModel):
    path: str = "."


class EditFileInput(BaseModel):
    path: str
    old_str: str
    new_str: str


def _parse(model: type[BaseModel], raw: dict[str, Any]) -> Any:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise ToolExecutionError(f"invalid input: {exc}") from exc


READ_FILE = ToolSpec(
    name="read_file",
    description=(
        "Read the contents of a given relative file path. Use this when you want "
        "to see what's inside a file. Do not use this with directory names."
    ),
    fields=(
        InputField("path", "string", "The relative path of a file in the working directory."),
    ),
)


def read_file(raw: dict[str, Any]) -> str:
    args = _parse(ReadFileInput, raw)
    return Path(args.path).read_text(encoding="utf-8")


LIST_FILES = ToolSpec(
    name="list_files",
    description=(
        "List files and directories at a given path. If no path is provided, "
        "lists files in the current directory."
    ),
    fields=(
        InputField(
            "path",
            "string",
            "Optional relative path to list files from. Defaults to current directory if not provided.",
            required=False,
        ),
    ),
)


def list_files(raw: dict[str, Any]) -> str:
    """JSON array of paths below ``path``; directories end with ``/``."""
    args = _parse(ListFilesInput, raw)
    root = Path(args.path)
    if not root.is_dir():
        raise ToolExecutionError(f"not a directory: {args.path}")

    entries = []
    for entry in sorted(root.rglob("*")):
        rel = entry.relative_to(root).as_posix()
        entries.append(f"{rel}/" if entry.is_dir() else rel)
    return json.dumps(entries)


EDIT_FILE = ToolSpec(
    name="edit_file",
    description=(
        "Make edits to a text file.\n\n"
        "Replaces 'old_str' with 'new_str' in the given file. 'old_str' and 'new_str' "
        "MUST be different from each other.\n\n"
        "If the file specified with path doesn't exist, it will be created."
    ),
    fields=(
        InputField("path", "string", "The path to the file"),
        InputField(
            "old_str",
            "string",
            "Text to search for - must match exactly and must only have one match exactly",
        ),
        InputField("new_str", "string", "Text to replace old_str with"),
    ),
)


def edit_file(raw: dict[str, Any]) -> str:
    args = _parse(EditFileInput, raw)
    if not args.path or args.old_str == args.new_str:
        raise ToolExecutionError("invalid input parameters")

    target = Path(args.path)
    if not target.exists():
        if args.old_str != "":
            raise ToolExecutionError(f"file not found: {args.path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(args.new_str, encoding="utf-8")
        return f"Successfully created file {args.path}"

    content = target.read_text(encoding="utf-8")
    if args.old_str and args.old_str not in content:
        raise ToolExecutionError("old_str not found in file")

    # only the first match is replaced
    target.write_text(content.replace(args.old_str, args.new_str, 1), encoding="utf-8")
    return "OK"


FILE_TOOLS = (
    (READ_FILE, read_file),
    (LIST_FILES, list_files),
    (EDIT_FILE, edit_file),
)
