"""Application intake bot: conversation flow and Telegram wiring."""

from .flow import ApplicationFlow, FlowOutcome, Markup
from .handlers import register_handlers

__all__ = ["ApplicationFlow", "FlowOutcome", "Markup", "register_handlers"]
