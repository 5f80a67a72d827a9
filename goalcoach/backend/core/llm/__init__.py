"""LLM provider clients and answer parsing."""

from __future__ import annotations

from goalcoach.backend.core.llm.client import (
    AnthropicClient,
    LLMClient,
    LLMError,
    LLMResponseError,
    LLMUnavailableError,
    OpenAIClient,
    create_client,
)
from goalcoach.backend.core.llm.parsing import coerce_string_list, extract_json, split_lines

__all__ = [
    "AnthropicClient",
    "LLMClient",
    "LLMError",
    "LLMResponseError",
    "LLMUnavailableError",
    "OpenAIClient",
    "coerce_string_list",
    "create_client",
    "extract_json",
    "split_lines",
]
