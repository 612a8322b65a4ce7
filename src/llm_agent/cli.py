"""Interactive command-line agent with the file tools."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import signal
import sys
from types import FrameType
from typing import Optional, Sequence

from llm_agent.config import AgentConfig
from llm_agent.console import ConsoleDisplay, StdinInputSource
from llm_agent.errors import ConfigurationError, InferenceTransportError
from llm_agent.factory import create_client
from llm_agent.loop import AgentLoop
from llm_agent.providers import Provider
from llm_agent.tools import default_registry

logger = logging.getLogger(__name__)

_ASSISTANT_LABELS = {
    Provider.ANTHROPIC: "Claude",
    Provider.OPENAI: "GPT",
    Provider.GEMINI: "Gemini",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-agent",
        description="Chat with a model that can read, list and edit local files.",
    )
    parser.add_argument("--provider", choices=[p.value for p in Provider])
    parser.add_argument("--model")
    parser.add_argument("--max-tokens", type=int)
    parser.add_argument("--tool-timeout", type=float, help="seconds per tool call")
    parser.add_argument(
        "--no-tool-timeout", action="store_true", help="let tool calls run indefinitely"
    )
    parser.add_argument("--max-concurrency", type=int)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


async def run_agent(config: AgentConfig) -> None:
    client = create_client(config.provider)
    display = ConsoleDisplay(assistant_label=_ASSISTANT_LABELS[config.provider])
    async with client:
        loop = AgentLoop(
            client,
            default_registry(),
            StdinInputSource(),
            display,
            config,
        )
        await loop.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = AgentConfig.from_env().replace(
            provider=args.provider,
            model=args.model,
            max_tokens=args.max_tokens,
            tool_timeout=args.tool_timeout,
            max_concurrency=args.max_concurrency,
        )
        if args.no_tool_timeout:
            config = dataclasses.replace(config, tool_timeout=None)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(f"Chat with {_ASSISTANT_LABELS[config.provider]} (use 'ctrl-c' to quit)")
    # asyncio.run only cancels the main task on the first SIGINT, which a
    # blocking read at the prompt never sees; interrupt immediately instead
    previous = signal.signal(signal.SIGINT, _interrupt)
    try:
        asyncio.run(run_agent(config))
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except InferenceTransportError as exc:
        logger.debug("Inference failed", exc_info=exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        return 130
    finally:
        signal.signal(signal.SIGINT, previous)
    return 0


def _interrupt(signum: int, frame: Optional[FrameType]) -> None:
    raise KeyboardInterrupt


if __name__ == "__main__":
    sys.exit(main())
