"""Test helpers for building discord.py doubles."""

from collections.abc import AsyncIterator, Iterable
from typing import Any
from unittest.mock import MagicMock


async def async_iter(items: Iterable[Any]) -> AsyncIterator[Any]:
    """Yield items asynchronously, like discord.py history iterators."""
    for item in items:
        yield item


async def failing_iter(error: Exception) -> AsyncIterator[Any]:
    """Raise error on the first iteration."""
    raise error
    yield  # pragma: no cover


def make_http_response(status: int, reason: str) -> MagicMock:
    """Create a response object accepted by discord.HTTPException."""
    response = MagicMock()
    response.status = status
    response.reason = reason
    return response


def make_discord_message(
    message_id: int = 1001,
    channel_id: int = 123,
    author_id: int = 42,
    author_name: str = "testuser",
    is_bot: bool = False,
    content: str | None = "Hello",
) -> MagicMock:
    """Create a mock discord.Message."""
    message = MagicMock()
    message.id = message_id
    message.channel.id = channel_id
    message.author.id = author_id
    message.author.name = author_name
    message.author.bot = is_bot
    message.content = content
    return message
