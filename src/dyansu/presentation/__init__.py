"""Presentation layer."""

from dyansu.presentation.discord_handlers import register_handlers

__all__ = ["register_handlers"]
