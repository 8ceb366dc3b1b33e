"""Discord event handlers."""

import logging

import discord

from dyansu.application.use_cases import ReplyToMessageUseCase
from dyansu.domain.services import MessagingService
from dyansu.infrastructure.discord import DiscordEventAdapter

logger = logging.getLogger(__name__)


def register_handlers(
    client: discord.Client,
    reply_use_case: ReplyToMessageUseCase,
    event_adapter: DiscordEventAdapter,
    messaging_service: MessagingService,
    apology_message: str | None = None,
) -> None:
    """Register Discord event handlers.

    Args:
        client: Discord client instance.
        reply_use_case: Use case for replying to messages.
        event_adapter: Adapter for converting events to entities.
        messaging_service: Service used to post the apology message.
        apology_message: Text sent when a reply fails. None disables it.
    """

    @client.event
    async def on_ready() -> None:
        """Log the connected bot identity."""
        logger.info("%s is connected!", client.user.name)

    @client.event
    async def on_message(message: discord.Message) -> None:
        """Handle message events.

        Messages from bots, including this one, are ignored so that the
        bot never answers itself. Every other message is answered.

        Args:
            message: Received Discord message.
        """
        if message.author.bot:
            return

        logger.info(
            "Processing message event: id=%s, channel=%s",
            message.id,
            message.channel.id,
        )

        domain_message = event_adapter.to_message(message)
        try:
            await reply_use_case.execute(domain_message)
        except Exception:
            logger.exception(
                "Error handling message event: id=%s, channel=%s",
                domain_message.id,
                domain_message.channel_id,
            )
            await _send_apology(domain_message.channel_id)

    async def _send_apology(channel_id: str) -> None:
        if not apology_message:
            return
        try:
            await messaging_service.send_message(
                channel_id=channel_id, text=apology_message
            )
        except Exception:
            logger.exception("Error sending apology message: channel=%s", channel_id)
