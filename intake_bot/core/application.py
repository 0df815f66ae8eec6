"""Application bootstrap helpers.

:func:`build_application` is the single entry-point for building the
Telegram application: it wires the in-memory services, the store and the
handlers together.
"""

from __future__ import annotations

import logging

from telegram import BotCommand
from telegram.error import TelegramError
from telegram.ext import Application

from intake_bot.bots.applications import ApplicationFlow, register_handlers
from intake_bot.bots.applications.constants import BOT_COMMANDS
from intake_bot.bots.applications.runtime import FLOW_KEY, TRIGGER_KEY
from intake_bot.database.db import SubmissionStore
from intake_bot.services.conversation import ConversationTracker
from intake_bot.services.rate_limiter import RateLimiter
from intake_bot.utils.config import BotSettings

logger = logging.getLogger("intake_bot.core")


async def _publish_commands(app: Application) -> None:
    try:
        await app.bot.set_my_commands([BotCommand(name, description) for name, description in BOT_COMMANDS])
    except TelegramError as exc:
        logger.warning("Could not publish bot commands: %s", exc)


def build_flow(settings: BotSettings, store: SubmissionStore) -> ApplicationFlow:
    """Create the flow with empty conversation and cooldown state."""
    return ApplicationFlow(
        ConversationTracker(),
        RateLimiter(cooldown_seconds=settings.cooldown_seconds),
        store,
        forward_chat_id=settings.group_chat_id,
    )


def build_application(settings: BotSettings, store: SubmissionStore) -> Application:
    """Create a Telegram ``Application`` ready for ``run_polling``.

    Parameters
    ----------
    settings:
        Bot settings; the token authenticates with the Telegram API.
    store:
        Store with an initialised schema.

    Notes
    -----
    Updates are processed one at a time, in arrival order. The flow relies
    on that to keep per-user state transitions ordered without locks.
    """

    app = (
        Application.builder()
        .token(settings.token)
        .concurrent_updates(False)
        .post_init(_publish_commands)
        .build()
    )
    app.bot_data[FLOW_KEY] = build_flow(settings, store)
    app.bot_data[TRIGGER_KEY] = settings.trigger
    register_handlers(app)
    return app
