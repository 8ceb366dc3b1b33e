"""Common fixtures."""

import pytest

from dyansu.domain.entities import Message, User


@pytest.fixture
def sample_user() -> User:
    """Create test user."""
    return User(id="U123", name="testuser", is_bot=False)


@pytest.fixture
def sample_bot() -> User:
    """Create test bot."""
    return User(id="B123", name="dyansu", is_bot=True)


@pytest.fixture
def user_message(sample_user: User) -> Message:
    """Create test user message."""
    return Message(id="1001", channel_id="C123", author=sample_user, text="Hello")


@pytest.fixture
def bot_message(sample_bot: User) -> Message:
    """Create test bot message."""
    return Message(
        id="1000", channel_id="C123", author=sample_bot, text="こんにちはでやんす"
    )
