"""Message entity."""

from dataclasses import dataclass

from dyansu.domain.entities.user import User


@dataclass(frozen=True)
class Message:
    """Message entity.

    Attributes:
        id: Platform-specific message ID.
        channel_id: Channel where the message was posted.
        author: User who sent the message.
        text: Message content.
    """

    id: str
    channel_id: str
    author: User
    text: str

    def is_from_bot(self) -> bool:
        """Check if this message was sent by an automated agent.

        Returns:
            True if the author is a bot.
        """
        return self.author.is_bot
