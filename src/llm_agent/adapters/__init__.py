"""Pure transformation adapters for different LLM providers.

Gemini is served through its OpenAI-compatible endpoint and shares the
OpenAI adapter.
"""

from .openai import OpenAIRequestAdapter
from .anthropic import AnthropicRequestAdapter

__all__ = [
    "OpenAIRequestAdapter",
    "AnthropicRequestAdapter",
]
