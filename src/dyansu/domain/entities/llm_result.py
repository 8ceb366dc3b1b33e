"""LLM result entities."""

from dataclasses import dataclass, field

from dyansu.domain.entities.llm_metrics import LLMMetrics


@dataclass(frozen=True)
class CompletionResult:
    """Chat completion result.

    Attributes:
        choices: Candidate texts in the order returned by the service.
            None where a choice carried no text content.
        metrics: LLM invocation metrics (optional).
    """

    choices: list[str | None] = field(default_factory=list)
    metrics: LLMMetrics | None = None


@dataclass(frozen=True)
class ReplyResult:
    """Outcome of replying to one inbound message.

    Attributes:
        sent: Number of candidates posted to the channel.
        failed: Number of candidates whose send failed.
        skipped: Number of candidates without text content.
    """

    sent: int = 0
    failed: int = 0
    skipped: int = 0
