from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from llm_agent import (
    AgentConfig,
    AgentLoop,
    ConsoleDisplay,
    InputField,
    Provider,
    ScriptedInputSource,
    ToolExecutionError,
    ToolSpec,
    create_client,
)
from llm_agent.tools import FILE_TOOLS
from llm_agent.registry import ToolRegistry

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

CURRENT_TIME = ToolSpec(
    name="current_time",
    description="Get the current wall-clock time in an IANA time zone.",
    fields=(InputField("tz", "string", "Time zone, e.g. Europe/Paris"),),
)


async def current_time(raw: dict[str, object]) -> str:
    """Async handlers are awaited directly by the dispatcher."""
    try:
        zone = ZoneInfo(str(raw["tz"]))
    except (KeyError, ZoneInfoNotFoundError) as exc:
        raise ToolExecutionError(f"unknown time zone: {raw.get('tz')!r}") from exc
    return datetime.now(timezone.utc).astimezone(zone).isoformat(timespec="seconds")


async def main(provider: Provider, model: str) -> None:
    registry = ToolRegistry.from_tools([*FILE_TOOLS, (CURRENT_TIME, current_time)])
    config = AgentConfig(provider=provider, model=model, max_tokens=1024)

    async with create_client(provider) as client:
        loop = AgentLoop(
            client,
            registry,
            ScriptedInputSource(
                [
                    "What time is it in Tokyo and in Lisbon?",
                    "How many Python files are in the current directory tree?",
                ]
            ),
            ConsoleDisplay(),
            config,
        )
        await loop.run()

    logger.info("Transcript:\n%s", loop.conversation.transcript())


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--provider",
        choices=[p.value for p in Provider],
        default=Provider.ANTHROPIC.value,
    )
    parser.add_argument("--model", default="claude-3-5-haiku-20241022")
    args = parser.parse_args()

    asyncio.run(main(Provider(args.provider), args.model))
