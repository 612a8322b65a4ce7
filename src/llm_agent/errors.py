"""
Error taxonomy for the agent core.

Tool‑level failures are reported back to the model as data and never unwind
the loop. Transport failures are translated from noisy provider tracebacks
into a single `InferenceTransportError`, preserving the original exception
for full tracebacks.
"""

from __future__ import annotations

import logging
from typing import Final, Optional, Type

import anthropic
import openai

__all__: tuple[str, ...] = (
    "AgentError",
    "ConfigurationError",
    "DuplicateToolNameError",
    "ToolNotFoundError",
    "ToolExecutionError",
    "InferenceTransportError",
    "classify_error",
)


class AgentError(Exception):
    """Base class for every error raised by llm_agent."""


class ConfigurationError(AgentError):
    """Startup configuration is missing or invalid."""


class DuplicateToolNameError(AgentError, ValueError):
    """Two tools were registered under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"tool {name!r} is already registered")
        self.name = name


class ToolNotFoundError(AgentError, LookupError):
    """The model asked for a tool the registry does not know."""

    def __init__(self, name: str) -> None:
        super().__init__(f"tool {name!r} not found")
        self.name = name


class ToolExecutionError(AgentError):
    """Raised by tool handlers to report a failure to the model."""


class InferenceTransportError(AgentError):
    """The inference call could not complete. Ends the run.

    Attributes:
        original_exc: The underlying provider exception.
    """

    original_exc: Exception

    def __init__(self, message: str, original_exc: Exception) -> None:
        super().__init__(message)
        self.original_exc = original_exc
        self.__cause__ = original_exc


API_ERRORS: Final[tuple[Type[Exception], ...]] = (
    openai.APIError,
    anthropic.APIError,
)

CONN_ERRORS: Final[tuple[Type[Exception], ...]] = (
    openai.APIConnectionError,
    anthropic.APIConnectionError,
    TimeoutError,
    ConnectionError,
)

RATE_LIMIT_ERRORS: Final[tuple[Type[Exception], ...]] = (
    openai.RateLimitError,
    anthropic.RateLimitError,
)

AUTH_ERRORS: Final[tuple[Type[Exception], ...]] = (
    openai.AuthenticationError,
    anthropic.AuthenticationError,
)


def classify_error(
    exc: Exception,
    logger: Optional[logging.Logger] = None,
) -> InferenceTransportError:
    """Wrap an SDK exception in InferenceTransportError with a friendly, concise message."""
    log = logger or logging.getLogger(__name__)

    if isinstance(exc, InferenceTransportError):
        return exc

    # order matters: the specific SDK errors subclass APIError
    if isinstance(exc, RATE_LIMIT_ERRORS):
        msg = "Rate‑limit exceeded – please retry later"
    elif isinstance(exc, AUTH_ERRORS):
        msg = "Authentication failed – check the API key"
    elif isinstance(exc, CONN_ERRORS):
        msg = "Connection problem – unable to reach the LLM provider"
    elif isinstance(exc, API_ERRORS):
        status = getattr(exc, "status_code", None)
        msg = f"Provider reported an error ({status})" if status else "Provider reported an error"
    else:
        msg = exc.__class__.__name__

    log.warning("Wrapping provider exception: %s", exc, extra={"exc": exc})
    return InferenceTransportError(f"{msg}: {exc}", exc)
