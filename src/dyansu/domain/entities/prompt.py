"""Prompt entities."""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Role tag of a prompt entry."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class PromptEntry:
    """A single role-tagged entry of a chat prompt.

    Attributes:
        role: Role tag.
        content: Entry text.
    """

    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        """Convert to an OpenAI-format message dict."""
        return {"role": self.role.value, "content": self.content}
