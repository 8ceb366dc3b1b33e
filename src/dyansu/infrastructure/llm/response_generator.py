"""LLM response generator."""

import logging

from dyansu.domain.entities import CompletionResult, LLMMetrics, PromptEntry
from dyansu.infrastructure.llm.client import LLMClient

logger = logging.getLogger(__name__)


class LiteLLMResponseGenerator:
    """LiteLLM-based ResponseGenerator implementation.

    This class implements the ResponseGenerator protocol using LiteLLM,
    sending the prompt entries as chat messages unchanged.
    """

    def __init__(
        self,
        client: LLMClient,
        *,
        debug_llm_messages: bool = False,
    ) -> None:
        """Initialize the generator.

        Args:
            client: LLMClient instance.
            debug_llm_messages: If True, log LLM messages at INFO level.
        """
        self._client = client
        self._debug_llm_messages = debug_llm_messages

    async def generate(self, prompt: list[PromptEntry]) -> CompletionResult:
        """Generate candidate responses.

        Args:
            prompt: Role-tagged prompt entries, system entry first.

        Returns:
            Completion result with every candidate.

        Raises:
            LLMError: If response generation fails.
        """
        messages = [entry.to_dict() for entry in prompt]

        if self._should_log():
            self._log_messages(messages)

        result = await self._client.complete(messages)

        if self._should_log():
            self._log_response(result)

        if result.metrics is not None:
            self._log_metrics(result.metrics)

        return result

    def _should_log(self) -> bool:
        """Check if logging should occur."""
        return self._debug_llm_messages or logger.isEnabledFor(logging.DEBUG)

    def _log_messages(self, messages: list[dict[str, str]]) -> None:
        """Log LLM request messages."""
        log_func = logger.info if self._debug_llm_messages else logger.debug
        log_func("=== LLM Request Messages ===")
        for i, msg in enumerate(messages):
            role = msg.get("role", "unknown")
            content = msg.get("content", "")
            log_func("[%d] role=%s", i, role)
            log_func("    content: %s", content)
        log_func("=== End of Messages ===")

    def _log_response(self, result: CompletionResult) -> None:
        """Log LLM response."""
        log_func = logger.info if self._debug_llm_messages else logger.debug
        log_func("=== LLM Response ===")
        for i, text in enumerate(result.choices):
            log_func("[%d] %s", i, text)
        log_func("=== End of Response ===")

    def _log_metrics(self, metrics: LLMMetrics) -> None:
        logger.info(
            "LLM metrics: input_tokens=%d, output_tokens=%d, "
            "total_tokens=%d, latency_ms=%s",
            metrics.input_tokens,
            metrics.output_tokens,
            metrics.total_tokens,
            metrics.latency_ms,
        )
