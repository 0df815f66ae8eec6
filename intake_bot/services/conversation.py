"""Per-user conversation state: who is expected to send application text."""
from __future__ import annotations

import logging
from typing import Set

logger = logging.getLogger("intake_bot.conversation")


class ConversationTracker:
    """Tracks users in the ``AwaitingText`` state.

    A user missing from the set is ``Idle``. State lives only as long as
    the process does.
    """

    def __init__(self) -> None:
        self._awaiting: Set[int] = set()

    def enter_application_mode(self, user_id: int) -> bool:
        """Mark ``user_id`` as awaiting text.

        Returns ``False`` when the user was already awaiting; the state is
        left untouched in that case.
        """
        if user_id in self._awaiting:
            return False
        self._awaiting.add(user_id)
        logger.debug("User %s is now awaiting application text", user_id)
        return True

    def is_awaiting(self, user_id: int) -> bool:
        return user_id in self._awaiting

    def consume(self, user_id: int) -> None:
        self._awaiting.discard(user_id)

    def reset(self) -> None:
        self._awaiting.clear()

    def __len__(self) -> int:
        return len(self._awaiting)


__all__ = ["ConversationTracker"]
