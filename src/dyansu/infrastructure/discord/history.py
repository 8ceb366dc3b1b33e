"""Discord conversation history service."""

import logging

import discord

from dyansu.domain.entities import Message
from dyansu.domain.exceptions import ChannelNotAccessibleError, HistoryFetchError
from dyansu.infrastructure.discord.channels import resolve_messageable
from dyansu.infrastructure.discord.event_adapter import DiscordEventAdapter

logger = logging.getLogger(__name__)


class DiscordConversationHistoryService:
    """Discord implementation of ConversationHistoryService.

    Fetches conversation history using the Discord REST API.
    """

    def __init__(
        self,
        client: discord.Client,
        event_adapter: DiscordEventAdapter | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            client: Discord client.
            event_adapter: Adapter converting Discord messages to entities.
        """
        self._client = client
        self._event_adapter = event_adapter or DiscordEventAdapter()

    async def fetch_channel_history(
        self,
        channel_id: str,
        limit: int = 8,
    ) -> list[Message]:
        """Fetch channel history.

        Discord returns the newest message first; that order is kept.

        Args:
            channel_id: Channel ID.
            limit: Maximum number of messages to fetch.

        Returns:
            List of messages, newest first.

        Raises:
            ChannelNotAccessibleError: Missing permissions or unknown channel.
            HistoryFetchError: Any other API failure.
        """
        channel = resolve_messageable(self._client, channel_id)

        try:
            messages = [
                self._event_adapter.to_message(msg)
                async for msg in channel.history(limit=limit)
            ]
        except (discord.Forbidden, discord.NotFound) as e:
            raise ChannelNotAccessibleError(
                channel_id, f"Cannot read history of channel {channel_id}: {e}"
            ) from e
        except discord.HTTPException as e:
            raise HistoryFetchError(channel_id, str(e)) from e

        logger.debug(
            "Fetched %d message(s) from channel %s", len(messages), channel_id
        )
        return messages
