from __future__ import annotations

import os
from enum import StrEnum
from typing import Final

from dotenv import load_dotenv

from llm_agent.errors import ConfigurationError


class Provider(StrEnum):
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GEMINI = "gemini"


_ENV_VARS: Final[dict[Provider, str]] = {
    Provider.ANTHROPIC: "ANTHROPIC_API_KEY",
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.GEMINI: "GEMINI_API_KEY",
}


def get_api_key(provider: Provider) -> str:
    """Return the API key for *provider* or raise ConfigurationError."""
    load_dotenv()
    try:
        env_var = _ENV_VARS[provider]
    except KeyError:
        raise ConfigurationError(f"No config for {provider!s}") from None

    try:
        return os.environ[env_var]
    except KeyError as exc:
        raise ConfigurationError(f"{env_var} missing") from exc


__all__ = ["Provider", "get_api_key"]
