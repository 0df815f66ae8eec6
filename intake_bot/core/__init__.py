"""Core application package.

Hosts the shared application wiring: building the Telegram application,
the conversation services and the store it talks to. The bot feature
itself lives under ``intake_bot/bots``.
"""

from .application import build_application, build_flow

__all__ = ["build_application", "build_flow"]
