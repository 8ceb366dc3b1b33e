"""Discord messaging service."""

import discord

from dyansu.domain.exceptions import ChannelNotAccessibleError
from dyansu.infrastructure.discord.channels import resolve_messageable


class DiscordMessagingService:
    """Discord implementation of MessagingService.

    This class implements the MessagingService protocol for Discord,
    providing message sending capabilities.
    """

    def __init__(self, client: discord.Client) -> None:
        """Initialize the service.

        Args:
            client: Discord client instance.
        """
        self._client = client

    async def send_message(self, channel_id: str, text: str) -> None:
        """Send a message to a Discord channel.

        Args:
            channel_id: Target channel ID.
            text: Message content.

        Raises:
            ChannelNotAccessibleError: If the channel is not accessible
                (missing permissions, unknown channel).
            discord.HTTPException: If the API call fails for other reasons.
        """
        channel = resolve_messageable(self._client, channel_id)
        try:
            await channel.send(text)
        except (discord.Forbidden, discord.NotFound) as e:
            raise ChannelNotAccessibleError(
                channel_id, f"Cannot access channel {channel_id}: {e}"
            ) from e
