"""Application bot handler registration."""

from telegram.ext import Application, CallbackQueryHandler, CommandHandler, MessageHandler, filters

from .constants import APPLY_COMMAND, START_COMMAND
from .runtime import dispatch, handle_error


def register_handlers(app: Application) -> Application:
    """Register command, button and text handlers for the application bot."""

    new_messages = filters.UpdateType.MESSAGE

    # Command handlers
    app.add_handler(CommandHandler(START_COMMAND, dispatch, filters=new_messages))
    app.add_handler(CommandHandler(APPLY_COMMAND, dispatch, filters=new_messages))

    # Inline "leave an application" button
    app.add_handler(CallbackQueryHandler(dispatch))

    # Reply-keyboard button, free text and unknown commands
    app.add_handler(MessageHandler(new_messages & filters.TEXT, dispatch))

    app.add_error_handler(handle_error)
    return app


__all__ = ["register_handlers"]
