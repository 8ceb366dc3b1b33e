"""LLM metrics entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LLMMetrics:
    """LLM invocation metrics.

    Attributes:
        input_tokens: Number of input tokens.
        output_tokens: Number of output tokens.
        total_tokens: Total number of tokens.
        latency_ms: Latency in milliseconds (optional).
    """

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0
    latency_ms: int | None = None

    @classmethod
    def from_usage(cls, usage: Any, latency_ms: int | None = None) -> "LLMMetrics":
        """Create LLMMetrics from an OpenAI-format usage object.

        Args:
            usage: ``response.usage`` of a chat completion (may be None).
            latency_ms: Measured request latency.

        Returns:
            LLMMetrics instance.
        """
        if usage is None:
            return cls(latency_ms=latency_ms)

        return cls(
            input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            output_tokens=getattr(usage, "completion_tokens", 0) or 0,
            total_tokens=getattr(usage, "total_tokens", 0) or 0,
            latency_ms=latency_ms,
        )
