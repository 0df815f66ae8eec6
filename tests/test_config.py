from pathlib import Path

import pytest

from intake_bot.errors import ConfigurationError
from intake_bot.utils.config import (
    TRIGGER_INLINE,
    TRIGGER_KEYBOARD,
    load_bot_settings,
    load_logging_settings,
    load_storage_settings,
)


def test_missing_token_is_fatal():
    with pytest.raises(ConfigurationError):
        load_bot_settings({})


def test_blank_token_is_fatal():
    with pytest.raises(ConfigurationError):
        load_bot_settings({"BOT_TOKEN": "   "})


def test_defaults():
    settings = load_bot_settings({"BOT_TOKEN": "123:abc"})

    assert settings.token == "123:abc"
    assert settings.group_chat_id is None
    assert settings.trigger == TRIGGER_KEYBOARD
    assert settings.cooldown_seconds == 60


def test_telegram_bot_token_alias_and_optional_values():
    settings = load_bot_settings(
        {
            "TELEGRAM_BOT_TOKEN": "123:abc",
            "GROUP_CHAT_ID": "-100500",
            "APPLICATION_TRIGGER": "Inline",
            "SUBMISSION_COOLDOWN_SECONDS": "30",
        }
    )

    assert settings.token == "123:abc"
    assert settings.group_chat_id == "-100500"
    assert settings.trigger == TRIGGER_INLINE
    assert settings.cooldown_seconds == 30


@pytest.mark.parametrize(
    "extra",
    [
        {"APPLICATION_TRIGGER": "buttons"},
        {"SUBMISSION_COOLDOWN_SECONDS": "soon"},
        {"SUBMISSION_COOLDOWN_SECONDS": "-1"},
    ],
)
def test_invalid_optional_values(extra):
    with pytest.raises(ConfigurationError):
        load_bot_settings({"BOT_TOKEN": "123:abc", **extra})


def test_storage_and_logging_settings():
    assert load_storage_settings({}).database_path == Path("data.db")
    assert load_storage_settings({"DATABASE_PATH": "/tmp/x.db"}).database_path == Path("/tmp/x.db")

    logging_settings = load_logging_settings({"LOG_LEVEL": "debug", "LOG_DIR": "/tmp/logs"})
    assert logging_settings.level == "DEBUG"
    assert logging_settings.log_dir == Path("/tmp/logs")
