"""Use cases."""

from dyansu.application.use_cases.reply_to_message import ReplyToMessageUseCase

__all__ = [
    "ReplyToMessageUseCase",
]
