"""Domain entities."""

from dyansu.domain.entities.llm_metrics import LLMMetrics
from dyansu.domain.entities.llm_result import CompletionResult, ReplyResult
from dyansu.domain.entities.message import Message
from dyansu.domain.entities.prompt import PromptEntry, Role
from dyansu.domain.entities.user import User

__all__ = [
    "CompletionResult",
    "LLMMetrics",
    "Message",
    "PromptEntry",
    "ReplyResult",
    "Role",
    "User",
]
