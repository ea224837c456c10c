"""
Chat session: one visitor's conversation and input policy.
"""

import logging
import time
from typing import Callable, Optional

from config import Config, get_config

from .chat.actions import QuickAction, suggest_actions
from .chat.engine import ChatEngine, contact_lines
from .chat.prompts import (
    ACTION_DOWNLOAD_RESUME,
    ACTION_SCHEDULE_CALL,
    ACTION_TRY_MODEL,
    LENGTH_NOTICE,
    PENDING_NOTICE,
    RATE_LIMIT_NOTICE,
    SHOW_ALL_PROJECTS_QUERY,
    WELCOME_MESSAGE,
    WELCOME_SUGGESTIONS,
)
from .history import ConversationState
from .models.schemas import ChatReply

logger = logging.getLogger(__name__)


class ChatSession:
    """Owns the conversation state and per-session flags of one chat widget."""

    def __init__(
        self,
        engine: ChatEngine,
        config: Optional[Config] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the session.

        Args:
            engine: Chat engine producing replies.
            config: Optional configuration (uses the default when omitted).
            clock: Monotonic clock in seconds, used for rate limiting.
        """
        self.engine = engine
        self.config = config or get_config()
        self.clock = clock
        self.history = ConversationState()
        self._last_message_time: Optional[float] = None
        self._pending = False

    @property
    def is_pending(self) -> bool:
        """True while a reply is being produced."""
        return self._pending

    def welcome(self) -> ChatReply:
        """Greeting shown when the chat is opened."""
        name = self.engine.knowledge_base.personal_info.name
        suggestions = "\n".join(f"- {s}" for s in WELCOME_SUGGESTIONS)
        return ChatReply(content=f"{WELCOME_MESSAGE.format(name=name)}\n\n{suggestions}")

    def check_input(self, message: str) -> Optional[str]:
        """
        Apply the input policy to a stripped, non-empty message.

        Returns:
            A notice when the message is rejected, otherwise None.
        """
        if self._pending:
            return PENDING_NOTICE

        limit = self.config.max_message_length
        if len(message) > limit:
            return LENGTH_NOTICE.format(limit=limit, length=len(message))

        now = self.clock()
        if (
            self._last_message_time is not None
            and now - self._last_message_time < self.config.min_seconds_between_messages
        ):
            return RATE_LIMIT_NOTICE

        self._last_message_time = now
        return None

    async def send(self, message: str) -> Optional[ChatReply]:
        """
        Send a visitor message.

        Returns:
            The reply, a rejection notice, or None for an empty message.
        """
        message = message.strip()
        if not message:
            return None

        notice = self.check_input(message)
        if notice:
            logger.info(f"Message rejected by input policy: {notice}")
            return ChatReply(content=notice, rejected=True)

        reply = await self._respond(message)
        logger.info(f"event=message_sent message_length={len(message)}")
        return reply

    async def run_action(self, action: QuickAction) -> ChatReply:
        """Handle a quick action chosen by the visitor."""
        logger.info(f"event=quick_action action={action.value}")

        if action == QuickAction.SEE_ALL_PROJECTS:
            if self._pending:
                return ChatReply(content=PENDING_NOTICE, rejected=True)
            return await self._respond(SHOW_ALL_PROJECTS_QUERY)

        if action == QuickAction.TRY_MODEL_DEMO:
            return ChatReply(content=ACTION_TRY_MODEL)

        contact = contact_lines(self.engine.knowledge_base)
        contact_line = "\n".join(contact)
        if action == QuickAction.DOWNLOAD_RESUME:
            content = ACTION_DOWNLOAD_RESUME.format(contact_line=contact_line)
        else:
            content = ACTION_SCHEDULE_CALL.format(contact_line=contact_line)
        return ChatReply(content=content.strip())

    async def _respond(self, message: str) -> ChatReply:
        self._pending = True
        try:
            answer = await self.engine.respond(message, self.history)
        finally:
            self._pending = False

        return ChatReply(content=answer, quick_actions=suggest_actions(message, answer))
