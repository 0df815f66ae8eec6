"""Inbound events understood by the application flow.

Telegram updates are turned into exactly one of ``Start``,
``EnterApplication``, ``Text`` or ``Other`` by :func:`classify_update`, so
the flow never probes raw update fields.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .constants import APPLY_BUTTON_LABEL, APPLY_CALLBACK_DATA, APPLY_COMMAND, PRIVATE_CHAT, START_COMMAND

if TYPE_CHECKING:  # pragma: no cover - hints only
    from telegram import Update


@dataclass(frozen=True)
class Sender:
    user_id: int
    username: Optional[str] = None


@dataclass(frozen=True)
class InboundEvent:
    sender: Optional[Sender]
    chat_type: str

    @property
    def is_private(self) -> bool:
        return self.chat_type == PRIVATE_CHAT


@dataclass(frozen=True)
class Start(InboundEvent):
    pass


@dataclass(frozen=True)
class EnterApplication(InboundEvent):
    via_callback: bool = False


@dataclass(frozen=True)
class Text(InboundEvent):
    body: str = ""


@dataclass(frozen=True)
class Other(InboundEvent):
    via_callback: bool = False


def _command_name(text: str) -> Optional[str]:
    """Return ``start`` for ``/start`` or ``/start@SomeBot arg``."""
    if not text.startswith("/"):
        return None
    head = text.split(maxsplit=1)[0][1:]
    return head.split("@", 1)[0].lower()


def classify_update(update: "Update", button_label: str = APPLY_BUTTON_LABEL) -> InboundEvent:
    user = update.effective_user
    chat = update.effective_chat
    sender = Sender(user_id=user.id, username=user.username) if user else None
    chat_type = chat.type if chat else ""

    query = update.callback_query
    if query is not None:
        # inline buttons only live in the bot's own messages; treat a
        # message-less callback as coming from the user's private chat
        if chat is None:
            chat_type = PRIVATE_CHAT
        if query.data == APPLY_CALLBACK_DATA:
            return EnterApplication(sender=sender, chat_type=chat_type, via_callback=True)
        return Other(sender=sender, chat_type=chat_type, via_callback=True)

    message = update.message
    text = message.text if message is not None else None
    if not text:
        return Other(sender=sender, chat_type=chat_type)

    command = _command_name(text)
    if command == START_COMMAND:
        return Start(sender=sender, chat_type=chat_type)
    if command == APPLY_COMMAND:
        return EnterApplication(sender=sender, chat_type=chat_type)
    if command is not None:
        return Other(sender=sender, chat_type=chat_type)

    if text.strip() == button_label:
        return EnterApplication(sender=sender, chat_type=chat_type)
    return Text(sender=sender, chat_type=chat_type, body=text)


__all__ = [
    "Sender",
    "InboundEvent",
    "Start",
    "EnterApplication",
    "Text",
    "Other",
    "classify_update",
]
