"""Centralised logging utilities."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, Optional, Union

LOG_FILE_NAME = "intake_bot.log"


def configure_logging(
    *,
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Path] = None,
    handlers: Optional[Iterable[logging.Handler]] = None,
) -> None:
    """Configure root logging for the bot.

    Existing handlers are cleared to avoid duplicate messages when the
    function is called multiple times (for example during tests).
    """

    if handlers is None:
        log_dir = Path("logs") if log_dir is None else log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers = [
            RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=5_000_000, backupCount=3, encoding="utf-8"),
            logging.StreamHandler(),
        ]

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # httpx logs request URLs, which contain the bot token
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("telegram").setLevel(logging.WARNING)


__all__ = ["configure_logging", "LOG_FILE_NAME"]
