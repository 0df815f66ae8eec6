"""Intake bot package initializer.

Collects service inquiries ("applications") from Telegram private chats,
stores them in SQLite and forwards a copy to an optional group chat.
"""

__version__ = "0.1.0"
