"""Per-user submission cooldown."""
from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from intake_bot.utils.config import DEFAULT_COOLDOWN_SECONDS


@dataclass(frozen=True)
class Allowed:
    pass


@dataclass(frozen=True)
class Denied:
    seconds_remaining: int


Decision = Union[Allowed, Denied]


class RateLimiter:
    """Allows one successful submission per user per cooldown window.

    ``check`` never records anything. Callers record a submission with
    ``record`` only after it was persisted, so a denied retry keeps counting
    down from the last success.
    """

    def __init__(
        self,
        cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.cooldown_seconds = cooldown_seconds
        self.clock = clock
        self._last_submission: Dict[int, float] = {}

    def check(self, user_id: int, now: Optional[float] = None) -> Decision:
        last = self._last_submission.get(user_id)
        if last is None:
            return Allowed()

        now = self.clock() if now is None else now
        elapsed = now - last
        if elapsed >= self.cooldown_seconds:
            return Allowed()
        return Denied(seconds_remaining=math.ceil(self.cooldown_seconds - elapsed))

    def record(self, user_id: int, now: Optional[float] = None) -> None:
        self._last_submission[user_id] = self.clock() if now is None else now

    def last_submission(self, user_id: int) -> Optional[float]:
        return self._last_submission.get(user_id)

    def reset(self) -> None:
        self._last_submission.clear()


__all__ = ["Allowed", "Denied", "Decision", "RateLimiter"]
