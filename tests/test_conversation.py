"""Tests for the append-only conversation log."""

import json

import pytest

from llm_agent.conversation import ConversationLog
from llm_agent.types import Message, TextBlock, ToolResultBlock, ToolUseBlock


class TestConversationLog:
    def test_starts_empty(self):
        assert len(ConversationLog()) == 0

    def test_append_keeps_order(self):
        log = ConversationLog()
        first = Message.user_text("one")
        second = Message.assistant([TextBlock("two")])
        log.append(first)
        log.append(second)
        assert log.snapshot() == (first, second)
        assert list(log) == [first, second]

    def test_append_rejects_none(self):
        log = ConversationLog()
        with pytest.raises(TypeError):
            log.append(None)  # type: ignore[arg-type]
        assert len(log) == 0

    def test_append_rejects_plain_dict(self):
        with pytest.raises(TypeError):
            ConversationLog().append({"role": "user", "content": "hi"})  # type: ignore[arg-type]

    def test_snapshot_is_not_affected_by_later_appends(self):
        log = ConversationLog()
        log.append(Message.user_text("one"))
        snap = log.snapshot()
        log.append(Message.user_text("two"))
        assert len(snap) == 1
        assert len(log) == 2

    def test_length_never_decreases_and_messages_do_not_change(self):
        log = ConversationLog()
        seen: list[Message] = []
        for i in range(5):
            msg = Message.user_text(str(i))
            log.append(msg)
            seen.append(msg)
            assert len(log) == i + 1
            assert log.snapshot() == tuple(seen)

    def test_transcript_is_deterministic_json(self):
        def build() -> ConversationLog:
            log = ConversationLog()
            log.append(Message.user_text("read foo"))
            log.append(Message.assistant([ToolUseBlock("t1", "read_file", {"path": "foo", "a": 1})]))
            log.append(Message.tool_results([ToolResultBlock("t1", "contents")]))
            return log

        first, second = build().transcript(), build().transcript()
        assert first == second
        decoded = json.loads(first)
        assert decoded[2]["content"][0] == {
            "type": "tool_result",
            "tool_use_id": "t1",
            "content": "contents",
            "is_error": False,
        }
