"""Logging setup for Strider.

Modules log through ``logging.getLogger(__name__)``; this wires the
``strider`` logger to a rotating file so nothing is written over the TUI.

Modified: 2026-10-19
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from strider.config.settings import Settings
from strider.core.exceptions import ConfigurationError

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_HANDLER_NAME = "strider-file"


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the package logger from settings.

    Args:
        settings: Loaded settings; ``settings.logging`` is used

    Returns:
        The configured ``strider`` logger

    Raises:
        ConfigurationError: If the level name is unknown
    """
    level_name = settings.logging.level.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {settings.logging.level}")

    logger = logging.getLogger("strider")
    logger.setLevel(level)
    logger.propagate = False

    # Replace a handler from an earlier call instead of stacking another
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()

    log_file = Path(settings.logging.file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    return logger
