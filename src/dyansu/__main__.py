"""アプリケーションのエントリポイント"""

import argparse
import asyncio
import logging
import os
import signal
import sys
from pathlib import Path

from dyansu.application.use_cases import ReplyToMessageUseCase
from dyansu.config import ConfigError, LoggingConfig, load_config
from dyansu.infrastructure.discord import (
    DiscordAppRunner,
    DiscordConversationHistoryService,
    DiscordEventAdapter,
    DiscordMessagingService,
    create_discord_client,
)
from dyansu.infrastructure.llm import LiteLLMResponseGenerator, LLMClient
from dyansu.presentation import register_handlers

DEFAULT_CONFIG_PATH = Path("config.yaml")

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    # Get root logger
    root_logger = logging.getLogger()

    # Set root level
    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Update handler format if specified
    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    # Configure individual loggers
    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


def resolve_config_path(cli_path: str | None) -> Path | None:
    """Decide which config file to load.

    An explicit path (command line, then DYANSU_CONFIG) must exist.
    Otherwise ./config.yaml is used when present, else built-in defaults.

    Args:
        cli_path: Value of --config.

    Returns:
        Path to load, or None for defaults only.
    """
    explicit = cli_path or os.environ.get("DYANSU_CONFIG")
    if explicit:
        return Path(explicit)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


async def main(config_path: Path | None = None) -> None:
    """アプリケーションを起動する"""
    try:
        config = load_config(config_path)
    except (ConfigError, FileNotFoundError) as e:
        logger.error("Failed to load config: %s", e)
        sys.exit(1)

    # Apply logging configuration
    configure_logging(config.logging)

    client = create_discord_client()

    # Build dependencies
    event_adapter = DiscordEventAdapter()
    messaging_service = DiscordMessagingService(client)
    history_service = DiscordConversationHistoryService(client, event_adapter)

    llm_client = LLMClient(config.llm)
    debug_llm_messages = bool(config.logging and config.logging.debug_llm_messages)
    response_generator = LiteLLMResponseGenerator(
        llm_client,
        debug_llm_messages=debug_llm_messages,
    )

    reply_use_case = ReplyToMessageUseCase(
        messaging_service=messaging_service,
        response_generator=response_generator,
        conversation_history_service=history_service,
        persona=config.persona,
        response_config=config.response,
    )

    register_handlers(
        client,
        reply_use_case,
        event_adapter,
        messaging_service,
        apology_message=config.response.apology_message,
    )

    runner = DiscordAppRunner(client, config.discord.bot_token)

    logger.info("Starting %s...", config.persona.name)
    logger.info("Using model %s", config.llm.model)

    runner_task = asyncio.create_task(runner.start())

    # Setup signal handlers for graceful shutdown
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def shutdown_handler() -> None:
        logger.info("Received shutdown signal...")
        stop_event.set()

    loop.add_signal_handler(signal.SIGINT, shutdown_handler)
    loop.add_signal_handler(signal.SIGTERM, shutdown_handler)

    # Wait for shutdown signal or for the client to stop on its own
    stop_task = asyncio.create_task(stop_event.wait())
    done, _ = await asyncio.wait(
        {runner_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
    )

    failed = runner_task in done and runner_task.exception() is not None
    if failed:
        logger.error("Discord client stopped: %s", runner_task.exception())

    # Graceful shutdown
    logger.info("Shutting down...")

    closed = await runner.close(timeout=5.0)
    if not closed:
        logger.warning("Runner close timed out, cancelling tasks...")

    runner_task.cancel()
    stop_task.cancel()
    await asyncio.gather(runner_task, stop_task, return_exceptions=True)

    logger.info("Shutdown complete")

    if failed:
        sys.exit(1)


def run() -> None:
    """Run the async main function."""
    parser = argparse.ArgumentParser(
        prog="dyansu",
        description="Discord bot relaying channel history to a chat completion API",
    )
    parser.add_argument(
        "--config",
        help="path to config.yaml (default: ./config.yaml, or built-in defaults)",
    )
    args = parser.parse_args()

    try:
        asyncio.run(main(resolve_config_path(args.config)))
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
