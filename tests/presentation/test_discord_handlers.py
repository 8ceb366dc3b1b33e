"""Tests for Discord event handlers."""

import logging
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest
from helpers import make_discord_message

from dyansu.domain.entities import Message, ReplyResult, User
from dyansu.infrastructure.discord import DiscordEventAdapter
from dyansu.infrastructure.llm import LLMError
from dyansu.presentation.discord_handlers import register_handlers

APOLOGY = "申し訳ないでやんす"


@pytest.fixture
def mock_reply_use_case() -> AsyncMock:
    """Create a mock ReplyToMessageUseCase."""
    use_case = AsyncMock()
    use_case.execute = AsyncMock(return_value=ReplyResult(sent=1))
    return use_case


@pytest.fixture
def mock_messaging_service() -> AsyncMock:
    """Create a mock DiscordMessagingService."""
    return AsyncMock()


@pytest.fixture
def mock_client() -> Mock:
    """Create a mock discord.Client capturing registered handlers."""
    client = Mock()
    client.handlers = {}

    def capture_event(func):
        client.handlers[func.__name__] = func
        return func

    client.event = capture_event
    client.user.name = "dyansu"
    return client


def _register(
    client: Mock,
    reply_use_case: AsyncMock,
    messaging_service: AsyncMock,
    apology_message: str | None = APOLOGY,
) -> dict[str, Any]:
    register_handlers(
        client,
        reply_use_case,
        DiscordEventAdapter(),
        messaging_service,
        apology_message=apology_message,
    )
    return client.handlers


@pytest.fixture
def registered_handlers(
    mock_client: Mock,
    mock_reply_use_case: AsyncMock,
    mock_messaging_service: AsyncMock,
) -> dict[str, Any]:
    """Register handlers and return captured handler dict."""
    return _register(mock_client, mock_reply_use_case, mock_messaging_service)


class TestOnReady:
    """Tests for the ready handler."""

    async def test_logs_connected_identity(
        self,
        registered_handlers: dict[str, Any],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """The connected bot name is logged at INFO."""
        with caplog.at_level(logging.INFO):
            await registered_handlers["on_ready"]()

        assert "dyansu is connected!" in caplog.text


class TestOnMessage:
    """Tests for the message handler."""

    async def test_human_message_is_answered(
        self,
        registered_handlers: dict[str, Any],
        mock_reply_use_case: AsyncMock,
    ) -> None:
        """Messages from humans are passed to the use case as entities."""
        await registered_handlers["on_message"](
            make_discord_message(message_id=10, channel_id=20, content="Hello")
        )

        mock_reply_use_case.execute.assert_awaited_once_with(
            Message(
                id="10",
                channel_id="20",
                author=User(id="42", name="testuser", is_bot=False),
                text="Hello",
            )
        )

    async def test_bot_message_is_ignored(
        self,
        registered_handlers: dict[str, Any],
        mock_reply_use_case: AsyncMock,
        mock_messaging_service: AsyncMock,
    ) -> None:
        """Messages from bots trigger nothing at all."""
        await registered_handlers["on_message"](make_discord_message(is_bot=True))

        mock_reply_use_case.execute.assert_not_awaited()
        mock_messaging_service.send_message.assert_not_awaited()

    async def test_failure_is_logged_and_apology_sent(
        self,
        registered_handlers: dict[str, Any],
        mock_reply_use_case: AsyncMock,
        mock_messaging_service: AsyncMock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Reply failures are logged and answered with the apology."""
        mock_reply_use_case.execute.side_effect = LLMError("API error")

        await registered_handlers["on_message"](make_discord_message(channel_id=20))

        assert "Error handling message event" in caplog.text
        mock_messaging_service.send_message.assert_awaited_once_with(
            channel_id="20", text=APOLOGY
        )

    async def test_failure_without_apology(
        self,
        mock_client: Mock,
        mock_reply_use_case: AsyncMock,
        mock_messaging_service: AsyncMock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """With no apology configured, failures are only logged."""
        handlers = _register(
            mock_client,
            mock_reply_use_case,
            mock_messaging_service,
            apology_message=None,
        )
        mock_reply_use_case.execute.side_effect = LLMError("API error")

        await handlers["on_message"](make_discord_message())

        assert "Error handling message event" in caplog.text
        mock_messaging_service.send_message.assert_not_awaited()

    async def test_apology_failure_does_not_raise(
        self,
        registered_handlers: dict[str, Any],
        mock_reply_use_case: AsyncMock,
        mock_messaging_service: AsyncMock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A failing apology is logged too and never escapes the handler."""
        mock_reply_use_case.execute.side_effect = LLMError("API error")
        mock_messaging_service.send_message.side_effect = RuntimeError("offline")

        await registered_handlers["on_message"](make_discord_message())

        assert "Error sending apology message" in caplog.text
