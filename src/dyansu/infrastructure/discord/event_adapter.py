"""Discord event adapter."""

import discord

from dyansu.domain.entities import Message, User


class DiscordEventAdapter:
    """Convert Discord objects to domain entities.

    This adapter translates discord.py models into
    platform-independent domain entities.
    """

    def to_user(self, author: discord.abc.User) -> User:
        """Convert a Discord author to a User entity.

        Args:
            author: Message author.

        Returns:
            User entity.
        """
        return User(
            id=str(author.id),
            name=author.name,
            is_bot=bool(author.bot),
        )

    def to_message(self, message: discord.Message) -> Message:
        """Convert a Discord message to a Message entity.

        Args:
            message: discord.py message.

        Returns:
            Message entity.
        """
        return Message(
            id=str(message.id),
            channel_id=str(message.channel.id),
            author=self.to_user(message.author),
            text=message.content or "",
        )
