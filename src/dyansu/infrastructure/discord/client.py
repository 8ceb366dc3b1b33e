"""Discord client and runner."""

import asyncio

import discord


def build_intents() -> discord.Intents:
    """Build the gateway intents the bot subscribes to.

    Returns:
        Intents for guild messages, message content and direct messages.
    """
    intents = discord.Intents.none()
    intents.guild_messages = True
    intents.message_content = True
    intents.dm_messages = True
    return intents


def create_discord_client() -> discord.Client:
    """Create a Discord client.

    Returns:
        Client configured with the bot's gateway intents.
    """
    return discord.Client(intents=build_intents())


class DiscordAppRunner:
    """Manage Discord client execution.

    This class handles logging in, running the gateway connection
    and closing it on shutdown.
    """

    def __init__(self, client: discord.Client, bot_token: str) -> None:
        """Initialize the runner.

        Args:
            client: Discord client instance.
            bot_token: Bot token used to log in.
        """
        self._client = client
        self._bot_token = bot_token

    async def start(self) -> None:
        """Log in and run the gateway connection until closed."""
        await self._client.start(self._bot_token)

    async def close(self, timeout: float = 5.0) -> bool:
        """Close the client with timeout.

        Args:
            timeout: Maximum seconds to wait for close.

        Returns:
            True if closed successfully, False if timed out.
        """
        if self._client.is_closed():
            return True
        try:
            await asyncio.wait_for(self._client.close(), timeout=timeout)
            return True
        except asyncio.TimeoutError:
            return False
