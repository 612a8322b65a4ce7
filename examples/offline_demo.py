"""
Drive the loop with a canned model to watch the turn-taking without an API key.

The fake model asks for read_file, then summarises whatever comes back.
"""

import asyncio
import logging

from llm_agent import AgentLoop, ConsoleDisplay, ScriptedInputSource, TextBlock, ToolUseBlock
from llm_agent.tools import default_registry
from llm_agent.types import ToolResultBlock


class CannedModel:
    async def complete(self, history, tools, *, model, max_tokens):
        last = history[-1].blocks[-1]
        if isinstance(last, ToolResultBlock):
            verdict = "failed" if last.is_error else "worked"
            return [TextBlock(f"The read {verdict}: {last.content[:60]!r}")]
        return [
            TextBlock("Let me look at that file."),
            ToolUseBlock(id=f"tu_{len(history)}", name="read_file", input={"path": "README.md"}),
        ]


async def main() -> None:
    loop = AgentLoop(
        CannedModel(),
        default_registry(),
        ScriptedInputSource(["what's in the readme?"]),
        ConsoleDisplay(assistant_label="Canned"),
    )
    await loop.run()
    print(f"{len(loop.conversation)} messages")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    asyncio.run(main())
