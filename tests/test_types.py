"""Tests for conversation and tool description types."""

import dataclasses

import pytest

from llm_agent.types import (
    InputField,
    Message,
    Role,
    TextBlock,
    ToolResultBlock,
    ToolSpec,
    ToolUseBlock,
)


class TestMessage:
    def test_user_text(self):
        msg = Message.user_text("hi")
        assert msg.role is Role.USER
        assert msg.blocks == (TextBlock("hi"),)

    def test_blocks_stored_as_tuple(self):
        msg = Message(Role.ASSISTANT, [TextBlock("a"), TextBlock("b")])
        assert isinstance(msg.blocks, tuple)

    def test_frozen(self):
        msg = Message.user_text("hi")
        with pytest.raises(dataclasses.FrozenInstanceError):
            msg.role = Role.ASSISTANT  # type: ignore[misc]

    def test_partition_preserves_order(self):
        msg = Message.assistant(
            [
                TextBlock("one"),
                ToolUseBlock("t1", "a", {}),
                TextBlock("two"),
                ToolUseBlock("t2", "b", {"x": 1}),
            ]
        )
        assert [b.text for b in msg.text_blocks()] == ["one", "two"]
        assert [b.id for b in msg.tool_uses()] == ["t1", "t2"]

    def test_tool_results_are_user_role(self):
        msg = Message.tool_results([ToolResultBlock("t1", "ok")])
        assert msg.role is Role.USER

    def test_as_dict(self):
        msg = Message.assistant([TextBlock("x"), ToolUseBlock("t1", "read_file", {"path": "a"})])
        assert msg.as_dict() == {
            "role": "assistant",
            "content": [
                {"type": "text", "text": "x"},
                {"type": "tool_use", "id": "t1", "name": "read_file", "input": {"path": "a"}},
            ],
        }


class TestToolSpec:
    def test_input_schema_from_fields(self):
        spec = ToolSpec(
            "list_files",
            "List files",
            (
                InputField("path", "string", "Where to look", required=False),
                InputField("mode", "string", enum=("flat", "deep")),
            ),
        )
        assert spec.input_schema == {
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": "Where to look"},
                "mode": {"type": "string", "enum": ["flat", "deep"]},
            },
            "required": ["mode"],
        }

    def test_no_fields_is_empty_object(self):
        spec = ToolSpec("ping", "Ping")
        assert spec.input_schema == {"type": "object", "properties": {}, "required": []}

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            ToolSpec("", "nameless")
