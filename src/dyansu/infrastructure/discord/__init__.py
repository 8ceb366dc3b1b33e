"""Discord integration."""

from dyansu.infrastructure.discord.client import (
    DiscordAppRunner,
    build_intents,
    create_discord_client,
)
from dyansu.infrastructure.discord.event_adapter import DiscordEventAdapter
from dyansu.infrastructure.discord.history import DiscordConversationHistoryService
from dyansu.infrastructure.discord.messaging import DiscordMessagingService

__all__ = [
    "DiscordAppRunner",
    "DiscordConversationHistoryService",
    "DiscordEventAdapter",
    "DiscordMessagingService",
    "build_intents",
    "create_discord_client",
]
