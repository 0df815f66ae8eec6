"""Exception types shared across the bot."""


class IntakeBotError(Exception):
    """Base class for all bot errors."""


class ConfigurationError(IntakeBotError):
    """Required startup configuration is missing or malformed."""


class PersistenceError(IntakeBotError):
    """The application store could not complete a write or read."""


class InvalidApplicationError(IntakeBotError, ValueError):
    """An application was rejected before reaching the store."""


__all__ = [
    "IntakeBotError",
    "ConfigurationError",
    "PersistenceError",
    "InvalidApplicationError",
]
