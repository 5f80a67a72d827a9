"""
LLM provider clients.

Thin synchronous wrappers around the Anthropic and OpenAI SDKs that expose
a single ``complete()`` call returning the model's text answer. Every
provider failure surfaces as an :class:`LLMError` so callers can fall back
to static data with one ``except`` clause.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Any

import anthropic
import openai

logger = logging.getLogger(__name__)

DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-20250514"
DEFAULT_OPENAI_MODEL = "gpt-4o"


class LLMError(Exception):
    """Raised when a completion cannot be obtained from the provider."""

    pass


class LLMUnavailableError(LLMError):
    """
    Raised when the provider client cannot be built.

    Usually a missing API key; the request never leaves the process.
    """

    pass


class LLMResponseError(LLMError):
    """Raised when the provider answers with no usable text."""

    pass


class LLMClient(ABC):
    """
    Abstract completion client.

    Attributes:
        provider: Provider identifier ('anthropic' or 'openai')
        model: Model name sent with every request
        max_tokens: Default completion budget
        timeout: Request timeout in seconds
    """

    provider: str = ""
    api_key_env: str = ""

    def __init__(self, model: str, max_tokens: int = 1024, timeout: float = 30.0):
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._sdk: Any = None

    def _get_sdk(self) -> Any:
        """Build the SDK client on first use."""
        if self._sdk is None:
            if not os.getenv(self.api_key_env):
                raise LLMUnavailableError(f"{self.api_key_env} is not set")
            try:
                self._sdk = self._build_sdk()
            except Exception as exc:
                raise LLMUnavailableError(f"Could not create {self.provider} client: {exc}") from exc
        return self._sdk

    @abstractmethod
    def _build_sdk(self) -> Any:
        """Instantiate the provider SDK client."""

    @abstractmethod
    def complete(
        self,
        prompt: str,
        *,
        system: str | None = None,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> str:
        """
        Send one user message and return the text answer.

        Args:
            prompt: User message content
            system: Optional system prompt
            max_tokens: Completion budget (defaults to ``self.max_tokens``)
            json_mode: Ask the provider for a JSON object where supported

        Returns:
            The answer text

        Raises:
            LLMError: On any provider, transport or response failure
        """


class AnthropicClient(LLMClient):
    """Completion client for the Anthropic Messages API."""

    provider = "anthropic"
    api_key_env = "ANTHROPIC_API_KEY"

    def __init__(
        self,
        model: str = DEFAULT_ANTHROPIC_MODEL,
        max_tokens: int = 1024,
        timeout: float = 30.0,
    ):
        super().__init__(model, max_tokens, timeout)

    def _build_sdk(self) -> anthropic.Anthropic:
        return anthropic.Anthropic(timeout=self.timeout)

    def complete(
        self,
        prompt: str,
        *,
        system: str | None = None,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> str:
        sdk = self._get_sdk()
        kwargs: dict[str, Any] = {
            "model": self.model,
            "max_tokens": max_tokens or self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        try:
            response = sdk.messages.create(**kwargs)
        except anthropic.AnthropicError as exc:
            raise LLMError(f"Anthropic request failed: {exc}") from exc

        if not response.content:
            raise LLMResponseError("Anthropic returned no content blocks")
        block = response.content[0]
        if getattr(block, "type", None) != "text":
            raise LLMResponseError(f"Unexpected content block type: {getattr(block, 'type', None)}")
        return block.text


class OpenAIClient(LLMClient):
    """Completion client for the OpenAI Chat Completions API."""

    provider = "openai"
    api_key_env = "OPENAI_API_KEY"

    def __init__(
        self,
        model: str = DEFAULT_OPENAI_MODEL,
        max_tokens: int = 1024,
        timeout: float = 30.0,
    ):
        super().__init__(model, max_tokens, timeout)

    def _build_sdk(self) -> openai.OpenAI:
        return openai.OpenAI(timeout=self.timeout)

    def complete(
        self,
        prompt: str,
        *,
        system: str | None = None,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> str:
        sdk = self._get_sdk()
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens or self.max_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = sdk.chat.completions.create(**kwargs)
        except openai.OpenAIError as exc:
            raise LLMError(f"OpenAI request failed: {exc}") from exc

        if not response.choices:
            raise LLMResponseError("OpenAI returned no choices")
        content = (response.choices[0].message.content or "").strip()
        if not content:
            raise LLMResponseError("OpenAI returned an empty message")
        return content


def create_client(llm_config: dict[str, Any] | None = None) -> LLMClient:
    """
    Create the completion client described by the ``llm`` config section.

    Args:
        llm_config: The ``llm`` section of the application config

    Returns:
        A configured, not yet connected, client

    Raises:
        ValueError: If the provider is unknown
    """
    cfg = llm_config or {}
    provider = str(cfg.get("provider", "anthropic")).lower()
    max_tokens = int(cfg.get("max_tokens", 1024))
    timeout = float(cfg.get("timeout", 30.0))

    if provider == "anthropic":
        client: LLMClient = AnthropicClient(
            model=cfg.get("anthropic_model", DEFAULT_ANTHROPIC_MODEL),
            max_tokens=max_tokens,
            timeout=timeout,
        )
    elif provider == "openai":
        client = OpenAIClient(
            model=cfg.get("openai_model", DEFAULT_OPENAI_MODEL),
            max_tokens=max_tokens,
            timeout=timeout,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider}. Use 'anthropic' or 'openai'.")

    logger.info("Using %s model %s", client.provider, client.model)
    return client
