"""Tests for Discord client construction and runner."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from dyansu.infrastructure.discord import (
    DiscordAppRunner,
    build_intents,
    create_discord_client,
)


class TestBuildIntents:
    """build_intents tests."""

    def test_message_intents_enabled(self) -> None:
        """Guild messages, message content and DMs are enabled."""
        intents = build_intents()

        assert intents.guild_messages is True
        assert intents.message_content is True
        assert intents.dm_messages is True

    def test_other_intents_disabled(self) -> None:
        """No other capability is requested."""
        intents = build_intents()

        expected = discord.Intents.none()
        expected.guild_messages = True
        expected.message_content = True
        expected.dm_messages = True
        assert intents.value == expected.value
        assert intents.members is False
        assert intents.presences is False

    def test_create_discord_client_uses_intents(self) -> None:
        """The client is created with the bot's intents."""
        client = create_discord_client()

        assert client.intents.value == build_intents().value


class TestDiscordAppRunner:
    """DiscordAppRunner tests."""

    @pytest.fixture
    def mock_client(self) -> MagicMock:
        """Create mock discord.Client."""
        client = MagicMock()
        client.start = AsyncMock()
        client.close = AsyncMock()
        client.is_closed = MagicMock(return_value=False)
        return client

    async def test_start_logs_in_with_token(self, mock_client: MagicMock) -> None:
        """start() runs the client with the bot token."""
        runner = DiscordAppRunner(mock_client, "discord-test-token")

        await runner.start()

        mock_client.start.assert_awaited_once_with("discord-test-token")

    async def test_close_already_closed(self, mock_client: MagicMock) -> None:
        """close() on a closed client returns True without closing again."""
        mock_client.is_closed.return_value = True
        runner = DiscordAppRunner(mock_client, "token")

        assert await runner.close() is True
        mock_client.close.assert_not_awaited()

    async def test_close_success(self, mock_client: MagicMock) -> None:
        """close() returns True when the client closes in time."""
        runner = DiscordAppRunner(mock_client, "token")

        assert await runner.close(timeout=1.0) is True
        mock_client.close.assert_awaited_once()

    async def test_close_timeout(self, mock_client: MagicMock) -> None:
        """close() returns False when closing takes too long."""

        async def slow_close() -> None:
            await asyncio.sleep(10)

        mock_client.close = AsyncMock(side_effect=slow_close)
        runner = DiscordAppRunner(mock_client, "token")

        assert await runner.close(timeout=0.01) is False
