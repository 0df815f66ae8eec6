"""Telegram side of the application bot.

Every registered handler ends up in :func:`dispatch`, which classifies the
update and hands it to the :class:`ApplicationFlow` stored in
``application.bot_data``.
"""
from __future__ import annotations

import logging

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from intake_bot.utils.config import TRIGGER_KEYBOARD

from .constants import APPLY_BUTTON_LABEL
from .events import classify_update
from .flow import ApplicationFlow, Markup
from .keyboards import build_markup

logger = logging.getLogger("intake_bot.runtime")

FLOW_KEY = "application_flow"
TRIGGER_KEY = "application_trigger"


class TelegramResponder:
    """Outbound operations for a single Telegram update."""

    def __init__(self, update: Update, context: ContextTypes.DEFAULT_TYPE, trigger: str = TRIGGER_KEYBOARD):
        self.update = update
        self.context = context
        self.trigger = trigger

    async def reply(self, text: str, markup: Markup = Markup.NONE) -> None:
        await self.context.bot.send_message(
            chat_id=self.update.effective_chat.id,
            text=text,
            reply_markup=build_markup(markup, self.trigger),
        )

    async def edit(self, text: str) -> bool:
        query = self.update.callback_query
        if query is None or query.message is None:
            return False
        try:
            await query.edit_message_text(text)
        except TelegramError as exc:
            logger.warning("Failed to edit message: %s", exc)
            return False
        return True

    async def acknowledge(self) -> None:
        query = self.update.callback_query
        if query is None:
            return
        try:
            await query.answer()
        except TelegramError as exc:
            logger.warning("Failed to answer callback query: %s", exc)

    async def forward(self, chat_id: str, text: str) -> None:
        try:
            await self.context.bot.send_message(chat_id=chat_id, text=text)
        except TelegramError as exc:
            logger.error("❌ Failed to forward application to %s: %s", chat_id, exc)


async def dispatch(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    flow: ApplicationFlow = context.bot_data[FLOW_KEY]
    trigger = context.bot_data.get(TRIGGER_KEY, TRIGGER_KEYBOARD)

    event = classify_update(update, APPLY_BUTTON_LABEL)
    responder = TelegramResponder(update, context, trigger)
    outcome = await flow.handle(event, responder)
    logger.debug("Handled %s -> %s", type(event).__name__, outcome.value)


async def handle_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors raised by handlers; polling keeps going."""
    logger.error("Unhandled error while processing update %s", update, exc_info=context.error)


__all__ = ["TelegramResponder", "dispatch", "handle_error", "FLOW_KEY", "TRIGGER_KEY"]
