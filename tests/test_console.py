"""Tests for operator I/O."""

import io

from llm_agent.console import ConsoleDisplay, ScriptedInputSource, StdinInputSource


class TestStdinInputSource:
    def test_reads_lines_then_eof(self):
        out = io.StringIO()
        source = StdinInputSource(io.StringIO("hi\r\nthere\n"), prompt="> ", out=out)
        assert source.read() == ("hi", True)
        assert source.read() == ("there", True)
        assert source.read() == ("", False)
        assert out.getvalue() == "> > > "

    def test_blank_line_is_not_eof(self):
        source = StdinInputSource(io.StringIO("\n"), prompt="", out=io.StringIO())
        assert source.read() == ("", True)


class TestScriptedInputSource:
    def test_replays_then_ends(self):
        source = ScriptedInputSource(["a", "b"])
        assert [source.read(), source.read(), source.read()] == [("a", True), ("b", True), ("", False)]
        assert source.reads == 3
        assert source.remaining == 0


class TestConsoleDisplay:
    def test_text_and_tool_lines(self):
        out = io.StringIO()
        display = ConsoleDisplay(out, assistant_label="Model")
        display.show_text("hello")
        display.show_tool_use("read_file", {"path": "a.txt"})
        lines = out.getvalue().splitlines()
        assert lines[0].endswith(": hello")
        assert "Model" in lines[0]
        assert lines[1].endswith('read_file({"path": "a.txt"})')
