"""LLM integration."""

from dyansu.infrastructure.llm.client import LLMClient
from dyansu.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
)
from dyansu.infrastructure.llm.response_generator import LiteLLMResponseGenerator

__all__ = [
    "LLMAuthenticationError",
    "LLMClient",
    "LLMError",
    "LLMRateLimitError",
    "LiteLLMResponseGenerator",
]
