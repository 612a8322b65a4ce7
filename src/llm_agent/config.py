"""
Run configuration, fixed for the lifetime of one agent loop.

Values come from keyword arguments, or from the environment (and a ``.env``
file) via ``AgentConfig.from_env``:

  LLM_AGENT_PROVIDER         anthropic | openai | gemini
  LLM_AGENT_MODEL            model identifier passed through to the provider
  LLM_AGENT_MAX_TOKENS       output token budget per inference call
  LLM_AGENT_TOOL_TIMEOUT     seconds per tool handler; empty or "none" disables
  LLM_AGENT_MAX_CONCURRENCY  handlers allowed to run at once within a batch
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from llm_agent.errors import ConfigurationError
from llm_agent.providers import Provider

__all__ = ["AgentConfig", "DEFAULT_MODEL", "DEFAULT_MAX_TOKENS"]

DEFAULT_MODEL = "claude-opus-4-5-20251101"
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TOOL_TIMEOUT = 60.0
DEFAULT_MAX_CONCURRENCY = 10

_ENV_PREFIX = "LLM_AGENT_"


@dataclass(frozen=True)
class AgentConfig:
    provider: Provider = Provider.ANTHROPIC
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    tool_timeout: Optional[float] = DEFAULT_TOOL_TIMEOUT
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "provider", Provider(self.provider))
        except ValueError:
            raise ConfigurationError(f"Unsupported provider: {self.provider}") from None
        if not self.model:
            raise ConfigurationError("model must not be empty")
        if self.max_tokens < 1:
            raise ConfigurationError(f"max_tokens must be positive, got {self.max_tokens}")
        if self.tool_timeout is not None and self.tool_timeout <= 0:
            raise ConfigurationError(
                f"tool_timeout must be positive or None, got {self.tool_timeout}"
            )
        if self.max_concurrency < 1:
            raise ConfigurationError(
                f"max_concurrency must be at least 1, got {self.max_concurrency}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AgentConfig":
        """Build a config from ``LLM_AGENT_*`` variables; unset ones keep defaults."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        values: dict[str, Any] = {}
        if provider := environ.get(f"{_ENV_PREFIX}PROVIDER"):
            values["provider"] = provider.strip().lower()
        if model := environ.get(f"{_ENV_PREFIX}MODEL"):
            values["model"] = model.strip()
        if max_tokens := environ.get(f"{_ENV_PREFIX}MAX_TOKENS"):
            values["max_tokens"] = _parse(int, "MAX_TOKENS", max_tokens)
        if (timeout := environ.get(f"{_ENV_PREFIX}TOOL_TIMEOUT")) is not None:
            if timeout.strip().lower() in ("", "none", "0"):
                values["tool_timeout"] = None
            else:
                values["tool_timeout"] = _parse(float, "TOOL_TIMEOUT", timeout)
        if concurrency := environ.get(f"{_ENV_PREFIX}MAX_CONCURRENCY"):
            values["max_concurrency"] = _parse(int, "MAX_CONCURRENCY", concurrency)
        return cls(**values)

    def replace(self, **overrides: Any) -> "AgentConfig":
        """Copy with overrides applied; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)


def _parse(kind: type, name: str, raw: str) -> Any:
    try:
        return kind(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"{_ENV_PREFIX}{name} must be {kind.__name__}, got {raw!r}"
        ) from None
