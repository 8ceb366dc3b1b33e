"""Domain services."""

from dyansu.domain.services.prompt_builder import (
    build_prompt,
    role_for,
    to_prompt_entry,
)
from dyansu.domain.services.protocols import (
    ConversationHistoryService,
    MessagingService,
    ResponseGenerator,
)

__all__ = [
    "ConversationHistoryService",
    "MessagingService",
    "ResponseGenerator",
    "build_prompt",
    "role_for",
    "to_prompt_entry",
]
