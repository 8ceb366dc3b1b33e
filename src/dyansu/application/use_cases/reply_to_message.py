"""Reply to message use case."""

import logging

from dyansu.config import PersonaConfig, ResponseConfig
from dyansu.domain.entities import Message, ReplyResult
from dyansu.domain.services import (
    ConversationHistoryService,
    MessagingService,
    ResponseGenerator,
    build_prompt,
)

logger = logging.getLogger(__name__)

# Discord rejects messages longer than this
MAX_MESSAGE_LENGTH = 2000


class ReplyToMessageUseCase:
    """Use case for replying to a channel message.

    Fetches the recent channel history, turns it into a chat prompt
    behind the persona instruction, and posts every candidate the
    completion service returns back to the same channel.
    """

    def __init__(
        self,
        messaging_service: MessagingService,
        response_generator: ResponseGenerator,
        conversation_history_service: ConversationHistoryService,
        persona: PersonaConfig,
        response_config: ResponseConfig | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            messaging_service: Service for sending messages.
            response_generator: Service for generating responses.
            conversation_history_service: Service for fetching channel history.
            persona: Bot persona configuration.
            response_config: History window and reply settings.
        """
        self._messaging_service = messaging_service
        self._response_generator = response_generator
        self._conversation_history_service = conversation_history_service
        self._persona = persona
        self._response_config = response_config or ResponseConfig()

    async def execute(self, message: Message) -> ReplyResult:
        """Execute the use case.

        Processing flow:
        1. Fetch channel history
        2. Build the prompt (persona instruction first)
        3. Generate candidates
        4. Send each candidate in order

        Failures in steps 1-3 propagate to the caller. A failed send is
        logged and the remaining candidates are still sent.

        Args:
            message: The received message.

        Returns:
            Counts of sent, failed and skipped candidates.
        """
        channel_id = message.channel_id

        # 1. Fetch channel history
        history = await self._conversation_history_service.fetch_channel_history(
            channel_id=channel_id,
            limit=self._response_config.history_limit,
        )
        if self._response_config.exclude_trigger_message:
            history = [m for m in history if m.id != message.id]

        # 2. Build the prompt
        prompt = build_prompt(self._persona.system_prompt, history)

        # 3. Generate candidates
        result = await self._response_generator.generate(prompt)

        # 4. Send each candidate
        sent = failed = skipped = 0
        for index, text in enumerate(result.choices):
            if text is None or not text.strip():
                logger.warning(
                    "Skipping choice %d without content: channel=%s",
                    index,
                    channel_id,
                )
                skipped += 1
                continue
            if len(text) > MAX_MESSAGE_LENGTH:
                logger.warning(
                    "Skipping choice %d longer than %d characters: channel=%s",
                    index,
                    MAX_MESSAGE_LENGTH,
                    channel_id,
                )
                skipped += 1
                continue

            try:
                await self._messaging_service.send_message(
                    channel_id=channel_id, text=text
                )
            except Exception:
                logger.exception("Error sending message: channel=%s", channel_id)
                failed += 1
            else:
                sent += 1

        reply = ReplyResult(sent=sent, failed=failed, skipped=skipped)
        logger.info(
            "Replied to message %s: sent=%d, failed=%d, skipped=%d",
            message.id,
            reply.sent,
            reply.failed,
            reply.skipped,
        )
        return reply
