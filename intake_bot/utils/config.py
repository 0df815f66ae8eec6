"""Configuration helpers for the intake bot."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from intake_bot.errors import ConfigurationError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Load environment variables once at module import. A .env in the working
# directory wins over the one at the project root; real env vars win over both.
load_dotenv(find_dotenv(usecwd=True))
load_dotenv(PROJECT_ROOT / ".env")

TRIGGER_KEYBOARD = "keyboard"
TRIGGER_INLINE = "inline"
TRIGGER_STYLES = (TRIGGER_KEYBOARD, TRIGGER_INLINE)

DEFAULT_COOLDOWN_SECONDS = 60


@dataclass(frozen=True)
class BotSettings:
    token: str
    group_chat_id: Optional[str] = None
    trigger: str = TRIGGER_KEYBOARD
    cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS


@dataclass(frozen=True)
class StorageSettings:
    database_path: Path


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    log_dir: Path = Path("logs")


def load_bot_settings(environ: Optional[Mapping[str, str]] = None) -> BotSettings:
    """Read bot settings from ``environ`` (defaults to ``os.environ``).

    Raises :class:`ConfigurationError` when the token is missing or when an
    optional value cannot be parsed.
    """

    env = os.environ if environ is None else environ

    token = (env.get("BOT_TOKEN") or env.get("TELEGRAM_BOT_TOKEN") or "").strip()
    if not token:
        raise ConfigurationError("BOT_TOKEN is not set")

    group_chat_id = (env.get("GROUP_CHAT_ID") or "").strip() or None

    trigger = (env.get("APPLICATION_TRIGGER") or TRIGGER_KEYBOARD).strip().lower()
    if trigger not in TRIGGER_STYLES:
        raise ConfigurationError(
            f"APPLICATION_TRIGGER must be one of {', '.join(TRIGGER_STYLES)}, got {trigger!r}"
        )

    raw_cooldown = env.get("SUBMISSION_COOLDOWN_SECONDS") or str(DEFAULT_COOLDOWN_SECONDS)
    try:
        cooldown = float(raw_cooldown)
    except ValueError as exc:
        raise ConfigurationError(f"SUBMISSION_COOLDOWN_SECONDS is not a number: {raw_cooldown!r}") from exc
    if cooldown < 0:
        raise ConfigurationError("SUBMISSION_COOLDOWN_SECONDS must not be negative")

    return BotSettings(
        token=token,
        group_chat_id=group_chat_id,
        trigger=trigger,
        cooldown_seconds=cooldown,
    )


def load_storage_settings(environ: Optional[Mapping[str, str]] = None) -> StorageSettings:
    env = os.environ if environ is None else environ
    return StorageSettings(database_path=Path(env.get("DATABASE_PATH", "data.db")))


def load_logging_settings(environ: Optional[Mapping[str, str]] = None) -> LoggingSettings:
    env = os.environ if environ is None else environ
    return LoggingSettings(
        level=env.get("LOG_LEVEL", "INFO").upper(),
        log_dir=Path(env.get("LOG_DIR", "logs")),
    )


@lru_cache(maxsize=1)
def get_bot_settings() -> BotSettings:
    return load_bot_settings()


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    return load_storage_settings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    return load_logging_settings()


__all__ = [
    "BotSettings",
    "StorageSettings",
    "LoggingSettings",
    "TRIGGER_KEYBOARD",
    "TRIGGER_INLINE",
    "load_bot_settings",
    "load_storage_settings",
    "load_logging_settings",
    "get_bot_settings",
    "get_storage_settings",
    "get_logging_settings",
]
