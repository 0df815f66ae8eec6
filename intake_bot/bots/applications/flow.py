"""Application intake flow.

Coordinates the conversation tracker, the cooldown and the store for one
inbound event at a time. The flow knows nothing about Telegram objects; it
talks to the transport through a :class:`Responder`.
"""
from __future__ import annotations

import asyncio
import enum
import logging
from typing import Optional, Protocol

from intake_bot.database.db import SubmissionStore
from intake_bot.errors import PersistenceError
from intake_bot.services.conversation import ConversationTracker
from intake_bot.services.rate_limiter import Denied, RateLimiter

from . import constants
from .events import EnterApplication, InboundEvent, Other, Start, Text

logger = logging.getLogger("intake_bot.flow")


class Markup(enum.Enum):
    NONE = "none"
    MAIN_MENU = "main_menu"
    FORCE_REPLY = "force_reply"


class FlowOutcome(enum.Enum):
    IGNORED = "ignored"
    WELCOMED = "welcomed"
    PROMPTED = "prompted"
    ALREADY_AWAITING = "already_awaiting"
    GUIDED = "guided"
    RATE_LIMITED = "rate_limited"
    EMPTY_TEXT = "empty_text"
    SUBMITTED = "submitted"
    PERSISTENCE_FAILED = "persistence_failed"


class Responder(Protocol):
    """Outbound side of the transport, scoped to the current event's chat."""

    async def reply(self, text: str, markup: Markup = Markup.NONE) -> None: ...

    async def edit(self, text: str) -> bool: ...

    async def acknowledge(self) -> None: ...

    async def forward(self, chat_id: str, text: str) -> None: ...


def format_forward(user_id: int, username: Optional[str], text: str) -> str:
    author = f"@{username}" if username else f"user {user_id}"
    return constants.FORWARD_TEMPLATE.format(author=author, text=text)


class ApplicationFlow:
    def __init__(
        self,
        tracker: ConversationTracker,
        limiter: RateLimiter,
        store: SubmissionStore,
        *,
        forward_chat_id: Optional[str] = None,
    ):
        self.tracker = tracker
        self.limiter = limiter
        self.store = store
        self.forward_chat_id = forward_chat_id

    async def handle(self, event: InboundEvent, responder: Responder) -> FlowOutcome:
        if event.sender is None:
            return FlowOutcome.IGNORED
        if not event.is_private:
            logger.debug("Ignoring %s from %s chat (user %s)", type(event).__name__, event.chat_type, event.sender.user_id)
            return FlowOutcome.IGNORED

        logger.info("📨 %s from %s", type(event).__name__, event.sender.username or event.sender.user_id)

        if isinstance(event, Start):
            await responder.reply(constants.WELCOME_TEXT, Markup.MAIN_MENU)
            return FlowOutcome.WELCOMED
        if isinstance(event, EnterApplication):
            return await self._enter_application(event, responder)
        if isinstance(event, Text):
            return await self._handle_text(event, responder)
        if isinstance(event, Other):
            if event.via_callback:
                await responder.acknowledge()
            await responder.reply(constants.GUIDANCE_TEXT, Markup.MAIN_MENU)
            return FlowOutcome.GUIDED
        raise TypeError(f"Unsupported event type: {type(event).__name__}")

    async def _enter_application(self, event: EnterApplication, responder: Responder) -> FlowOutcome:
        if event.via_callback:
            await responder.acknowledge()

        if self.tracker.enter_application_mode(event.sender.user_id):
            text, outcome = constants.PROMPT_TEXT, FlowOutcome.PROMPTED
        else:
            text, outcome = constants.ALREADY_AWAITING_TEXT, FlowOutcome.ALREADY_AWAITING

        if event.via_callback and await responder.edit(text):
            return outcome
        await responder.reply(text, Markup.FORCE_REPLY)
        return outcome

    async def _handle_text(self, event: Text, responder: Responder) -> FlowOutcome:
        sender = event.sender
        if not self.tracker.is_awaiting(sender.user_id):
            await responder.reply(constants.GUIDANCE_TEXT, Markup.MAIN_MENU)
            return FlowOutcome.GUIDED

        now = self.limiter.clock()
        decision = self.limiter.check(sender.user_id, now)
        if isinstance(decision, Denied):
            logger.info("User %s rate limited for %ss", sender.user_id, decision.seconds_remaining)
            await responder.reply(constants.RATE_LIMITED_TEXT.format(seconds=decision.seconds_remaining))
            return FlowOutcome.RATE_LIMITED

        if not event.body.strip():
            await responder.reply(constants.EMPTY_TEXT, Markup.FORCE_REPLY)
            return FlowOutcome.EMPTY_TEXT

        try:
            await asyncio.to_thread(self.store.insert, sender.user_id, sender.username, event.body)
        except PersistenceError as exc:
            logger.error("❌ SQLite error: %s", exc)
            await responder.reply(constants.PERSISTENCE_FAILED_TEXT)
            return FlowOutcome.PERSISTENCE_FAILED

        self.tracker.consume(sender.user_id)
        self.limiter.record(sender.user_id, now)

        await responder.reply(constants.CONFIRMATION_TEXT, Markup.MAIN_MENU)

        if self.forward_chat_id:
            await responder.forward(
                self.forward_chat_id,
                format_forward(sender.user_id, sender.username, event.body),
            )
        return FlowOutcome.SUBMITTED


__all__ = ["ApplicationFlow", "FlowOutcome", "Markup", "Responder", "format_forward"]
