# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: logging_utils.py
# -----------------------------------------------------------------------------

# logging_utils.py
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import colorlog

BASE_LOGGER_NAME = "verse_search"


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "y")


def _create_logger(full_name: str) -> logging.Logger:
    """
    Internal helper to create/configure a logger with a given full name.
    """
    logger = logging.getLogger(full_name)

    if not logger.handlers:
        # Console logger
        handler = logging.StreamHandler()

        formatter = colorlog.ColoredFormatter(
            fmt=(
                "%(log_color)s%(asctime)s [%(levelname)s] "
                "%(name)s:%(lineno)d:%(reset)s %(message_log_color)s%(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
            secondary_log_colors={
                "message": {
                    "INFO": "white",
                    "WARNING": "yellow",
                    "ERROR": "light_red",
                    "CRITICAL": "red",
                }
            },
            style="%",
        )

        handler.setFormatter(formatter)
        logger.addHandler(handler)

        # Optional file logger (off unless VERSE_LOG_TO_FILE is set)
        if _env_flag("VERSE_LOG_TO_FILE", "0"):
            log_path = Path(os.getenv("VERSE_LOG_FILE", "./logs/verse_search.log"))
            _ensure_parent_dir(log_path)

            max_bytes = int(os.getenv("VERSE_LOG_MAX_BYTES", str(5 * 1024 * 1024)))  # 5MB
            backup_count = int(os.getenv("VERSE_LOG_BACKUP_COUNT", "5"))

            file_handler = RotatingFileHandler(
                filename=str(log_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
            logger.addHandler(file_handler)

        level_name = os.getenv("VERSE_LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, level_name, logging.INFO))
        logger.propagate = False

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Generic logger that does not include a class name.
    """
    full_name = f"{BASE_LOGGER_NAME}.{name}" if name else BASE_LOGGER_NAME
    return _create_logger(full_name)


def get_class_logger(cls: type) -> logging.Logger:
    """
    Returns a logger whose name includes module + class, e.g.:

      verse_search.services.VerseSearchService.VerseSearchService
      verse_search.embedding.OllamaEmbedder.OllamaEmbedder
    """
    module = getattr(cls, "__module__", "unknown_module")
    classname = getattr(cls, "__name__", "UnknownClass")

    return _create_logger(f"{BASE_LOGGER_NAME}.{module}.{classname}")
