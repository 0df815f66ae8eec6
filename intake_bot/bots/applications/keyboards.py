"""Telegram markup for the application bot."""
from __future__ import annotations

from typing import Optional, Union

from telegram import ForceReply, InlineKeyboardButton, InlineKeyboardMarkup, ReplyKeyboardMarkup

from intake_bot.utils.config import TRIGGER_INLINE

from .constants import APPLY_BUTTON_LABEL, APPLY_CALLBACK_DATA
from .flow import Markup

TelegramMarkup = Union[ReplyKeyboardMarkup, InlineKeyboardMarkup, ForceReply]


def build_main_menu(trigger: str) -> Union[ReplyKeyboardMarkup, InlineKeyboardMarkup]:
    """Main menu carrying the "leave an application" trigger."""
    if trigger == TRIGGER_INLINE:
        return InlineKeyboardMarkup([[InlineKeyboardButton(APPLY_BUTTON_LABEL, callback_data=APPLY_CALLBACK_DATA)]])
    return ReplyKeyboardMarkup([[APPLY_BUTTON_LABEL]], resize_keyboard=True)


def build_markup(markup: Markup, trigger: str) -> Optional[TelegramMarkup]:
    if markup is Markup.MAIN_MENU:
        return build_main_menu(trigger)
    if markup is Markup.FORCE_REPLY:
        return ForceReply()
    return None


__all__ = ["build_main_menu", "build_markup"]
