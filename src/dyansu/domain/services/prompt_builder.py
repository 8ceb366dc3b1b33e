"""Prompt construction from channel history."""

from collections.abc import Sequence

from dyansu.domain.entities import Message, PromptEntry, Role


def role_for(message: Message) -> Role:
    """Return the role tag of a history message.

    Messages written by bots become assistant turns, everything else
    is a user turn.
    """
    return Role.ASSISTANT if message.is_from_bot() else Role.USER


def to_prompt_entry(message: Message) -> PromptEntry:
    """Map a history message to a role-tagged prompt entry."""
    return PromptEntry(role=role_for(message), content=message.text)


def build_prompt(
    system_prompt: str,
    history: Sequence[Message],
) -> list[PromptEntry]:
    """Build a chat prompt.

    The system entry is always first, followed by exactly one entry per
    history message in the order given.

    Args:
        system_prompt: Persona instruction.
        history: Channel history window.

    Returns:
        Prompt entries.
    """
    entries = [PromptEntry(role=Role.SYSTEM, content=system_prompt)]
    entries.extend(to_prompt_entry(message) for message in history)
    return entries
