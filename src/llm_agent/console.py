"""Operator-facing input sources and display sinks."""

from __future__ import annotations

import json
import sys
from collections import deque
from typing import Any, Iterable, Protocol, TextIO

__all__ = [
    "InputSource",
    "DisplaySink",
    "StdinInputSource",
    "ScriptedInputSource",
    "ConsoleDisplay",
]

_BLUE = "\u001b[94m"
_YELLOW = "\u001b[93m"
_GREEN = "\u001b[92m"
_RESET = "\u001b[0m"


class InputSource(Protocol):
    """Blocking line source. ``ok=False`` means end of input."""

    def read(self) -> tuple[str, bool]: ...


class DisplaySink(Protocol):
    """Observes model text and tool invocations. Never feeds back."""

    def show_text(self, text: str) -> None: ...

    def show_tool_use(self, name: str, input: dict[str, Any]) -> None: ...


class StdinInputSource:
    """Reads operator lines from a text stream, prompting before each read."""

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        prompt: str = f"{_BLUE}You{_RESET}: ",
        out: TextIO | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._out = out if out is not None else sys.stdout
        self.prompt = prompt

    def read(self) -> tuple[str, bool]:
        if self.prompt:
            self._out.write(self.prompt)
            self._out.flush()
        line = self._stream.readline()
        if not line:
            return "", False
        return line.rstrip("\r\n"), True


class ScriptedInputSource:
    """Replays a fixed list of lines, then reports end of input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = deque(lines)
        self.reads = 0

    def read(self) -> tuple[str, bool]:
        self.reads += 1
        if not self._lines:
            return "", False
        return self._lines.popleft(), True

    @property
    def remaining(self) -> int:
        return len(self._lines)


class ConsoleDisplay:
    """ANSI-coloured terminal output."""

    def __init__(self, out: TextIO | None = None, *, assistant_label: str = "Claude") -> None:
        self._out = out if out is not None else sys.stdout
        self.assistant_label = assistant_label

    def show_text(self, text: str) -> None:
        print(f"{_YELLOW}{self.assistant_label}{_RESET}: {text}", file=self._out)

    def show_tool_use(self, name: str, input: dict[str, Any]) -> None:
        print(f"{_GREEN}tool{_RESET}: {name}({json.dumps(input)})", file=self._out)
