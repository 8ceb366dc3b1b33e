"""LLM client wrapper."""

import logging
import time
from typing import Any

import litellm
from litellm.exceptions import AuthenticationError, RateLimitError

from dyansu.config import LLMConfig
from dyansu.domain.entities import CompletionResult, LLMMetrics
from dyansu.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
)

logger = logging.getLogger(__name__)


class LLMClient:
    """LiteLLM wrapper client.

    This class provides a simplified interface to LiteLLM,
    applying configuration and handling errors. A single instance is
    shared by every event task; it holds no per-request state.
    """

    def __init__(self, config: LLMConfig) -> None:
        """Initialize the client.

        Args:
            config: LLM configuration (model, api_key, optional sampling params).
        """
        self._config = config

    def _build_params(
        self,
        messages: list[dict[str, str]],
        **kwargs: Any,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "model": self._config.model,
            "messages": messages,
        }
        if self._config.api_key is not None:
            params["api_key"] = self._config.api_key
        # Unset sampling parameters are left to the service defaults
        if self._config.temperature is not None:
            params["temperature"] = self._config.temperature
        if self._config.max_tokens is not None:
            params["max_tokens"] = self._config.max_tokens
        params.update(kwargs)
        return params

    async def complete(
        self,
        messages: list[dict[str, str]],
        **kwargs: Any,
    ) -> CompletionResult:
        """Execute chat completion.

        Args:
            messages: OpenAI-format message list.
                [{"role": "system", "content": "..."}, ...]
            **kwargs: Additional parameters (override config).

        Returns:
            Every choice's text content, in the order returned.

        Raises:
            LLMAuthenticationError: Invalid API key.
            LLMRateLimitError: Rate limit exceeded.
            LLMError: Other API errors.
        """
        params = self._build_params(messages, **kwargs)

        logger.debug("LLM request: model=%s", params["model"])

        started = time.monotonic()
        try:
            response = await litellm.acompletion(**params)
        except AuthenticationError as e:
            logger.error("LLM authentication error: %s", e)
            raise LLMAuthenticationError(str(e)) from e
        except RateLimitError as e:
            logger.warning("LLM rate limit exceeded: %s", e)
            raise LLMRateLimitError(str(e)) from e
        except Exception as e:
            logger.error("LLM error: %s", e)
            raise LLMError(str(e)) from e

        latency_ms = int((time.monotonic() - started) * 1000)
        choices = [choice.message.content for choice in response.choices]
        logger.debug("LLM response received: %d choice(s)", len(choices))

        return CompletionResult(
            choices=choices,
            metrics=LLMMetrics.from_usage(
                getattr(response, "usage", None), latency_ms=latency_ms
            ),
        )
