"""Domain service protocols."""

from typing import Protocol

from dyansu.domain.entities import CompletionResult, Message, PromptEntry


class ConversationHistoryService(Protocol):
    """Conversation history retrieval abstraction (platform-independent).

    This protocol defines the interface for fetching conversation history
    from any messaging platform (Discord, Slack, etc.).
    """

    async def fetch_channel_history(
        self,
        channel_id: str,
        limit: int = 8,
    ) -> list[Message]:
        """Fetch channel history.

        Args:
            channel_id: Channel ID.
            limit: Maximum number of messages to fetch.

        Returns:
            List of messages in the order returned by the platform.
        """
        ...


class MessagingService(Protocol):
    """Messaging abstraction (platform-independent).

    This protocol defines the interface for sending messages
    to any messaging platform (Discord, Slack, etc.).
    """

    async def send_message(self, channel_id: str, text: str) -> None:
        """Send a message to a channel.

        Args:
            channel_id: Target channel ID.
            text: Message content.
        """
        ...


class ResponseGenerator(Protocol):
    """Response generation abstraction.

    This protocol defines the interface for generating
    responses using LLM or other mechanisms.
    """

    async def generate(self, prompt: list[PromptEntry]) -> CompletionResult:
        """Generate candidate responses.

        Args:
            prompt: Role-tagged prompt entries, system entry first.

        Returns:
            Completion result holding every candidate text.
        """
        ...
