"""Entry point for the application intake bot."""
import logging
import sys

from telegram import Update

from intake_bot.core import build_application
from intake_bot.database.db import SubmissionStore
from intake_bot.errors import ConfigurationError, PersistenceError
from intake_bot.utils.config import get_bot_settings, get_logging_settings, get_storage_settings
from intake_bot.utils.logger import configure_logging

logger = logging.getLogger("intake_bot")


def main() -> None:
    log_settings = get_logging_settings()
    configure_logging(level=log_settings.level, log_dir=log_settings.log_dir)

    try:
        settings = get_bot_settings()
    except ConfigurationError as exc:
        logger.critical("❌ %s", exc)
        sys.exit(1)

    storage = get_storage_settings()
    logger.info("🔧 Using DB file: %s", storage.database_path.resolve())
    store = SubmissionStore(storage.database_path)
    try:
        store.initialize_schema()
    except PersistenceError as exc:
        logger.critical("❌ %s", exc)
        sys.exit(1)

    if not settings.group_chat_id:
        logger.info("GROUP_CHAT_ID not set; applications will not be forwarded")

    app = build_application(settings, store)
    logger.info("🚀 Bot started (trigger: %s). Polling...", settings.trigger)
    # run_polling stops gracefully on SIGINT/SIGTERM
    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
