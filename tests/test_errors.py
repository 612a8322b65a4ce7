"""Tests for provider error classification."""

import logging

from llm_agent.errors import (
    AgentError,
    InferenceTransportError,
    ToolNotFoundError,
    classify_error,
)


class TestClassifyError:
    def test_connection_error(self):
        exc = ConnectionError("refused")
        wrapped = classify_error(exc)
        assert isinstance(wrapped, InferenceTransportError)
        assert str(wrapped).startswith("Connection problem")
        assert wrapped.original_exc is exc

    def test_timeout(self):
        assert str(classify_error(TimeoutError("slow"))).startswith("Connection problem")

    def test_unknown_error_uses_class_name(self):
        wrapped = classify_error(ValueError("bad request body"))
        assert str(wrapped) == "ValueError: bad request body"

    def test_already_wrapped_passes_through(self):
        wrapped = InferenceTransportError("x", RuntimeError("x"))
        assert classify_error(wrapped) is wrapped

    def test_logs_warning(self, caplog):
        logger = logging.getLogger("test.classify")
        with caplog.at_level(logging.WARNING, logger="test.classify"):
            classify_error(RuntimeError("boom"), logger)
        assert "boom" in caplog.text


class TestHierarchy:
    def test_tool_not_found_is_lookup_error(self):
        exc = ToolNotFoundError("zap")
        assert isinstance(exc, LookupError)
        assert isinstance(exc, AgentError)
        assert exc.name == "zap"
