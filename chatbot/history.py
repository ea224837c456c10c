"""
In-memory conversation state for a chat session.
"""

import logging
from typing import Iterator

from .models.schemas import Turn

logger = logging.getLogger(__name__)

# Last 3 user/assistant exchanges
DEFAULT_WINDOW = 6


class ConversationState:
    """Append-only, ordered log of conversation turns.

    The full log is kept for the lifetime of the session; prompt building
    only ever reads a bounded window of the most recent turns.
    """

    def __init__(self):
        self._turns: list[Turn] = []

    def append(self, turn: Turn) -> None:
        """Add a turn to the end of the log."""
        self._turns.append(turn)
        logger.debug(f"Appended {turn.role} turn ({len(self._turns)} total)")

    def recent_window(self, n: int = DEFAULT_WINDOW) -> list[Turn]:
        """
        Get the last ``n`` turns in their original order.

        Args:
            n: Number of turns to return.

        Returns:
            List of at most ``n`` turns.
        """
        if n <= 0:
            return []
        return list(self._turns[-n:])

    def as_messages(self, n: int = DEFAULT_WINDOW) -> list[dict]:
        """Recent window as ``{"role", "content"}`` prompt messages."""
        return [
            {"role": turn.role, "content": turn.content}
            for turn in self.recent_window(n)
        ]

    @property
    def turns(self) -> tuple[Turn, ...]:
        """Read-only view of the full log."""
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(tuple(self._turns))
