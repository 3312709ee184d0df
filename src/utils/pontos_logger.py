# pontos_logger.py
"""
Console logging for the PONTOS exporter, with colour and an optional rotating file.

Usage:
    from src.utils.pontos_logger import pontosLogger, get_logger, configure_logger

    pontosLogger.info("Downloading")  # package-wide logger
    log = get_logger("pipeline")      # -> "pontos.pipeline"
    log.debug("details...")

Env overrides:
    PONTOS_LOG_LEVEL=INFO
    PONTOS_LOG_FILE=/path/to/pontos.log
    PONTOS_LOG_NO_COLOR=1
"""

# pylint: disable=W0602, W0603

from __future__ import annotations

import os
import sys
from typing import Optional
import logging
import logging.handlers
import colorama

BASE_NAME = "pontos"

__CONFIGURED = False

# ########################################################################
# Color support
# ########################################################################


_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"

ANSI = {
    "red": "\x1b[31m",
    "yellow": "\x1b[33m",
    "cyan": "\x1b[36m",
    "light_green": "\x1b[92m",
}


def _stream_supports_color(stream: object) -> bool:
    """Return True if stream is a TTY."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def _enable_windows_ansi() -> bool:
    """Let the Windows console interpret ANSI escapes."""
    try:
        colorama.just_fix_windows_console()
        return True
    except OSError:
        return False


# ########################################################################
# Formatter
# ########################################################################


class ColorFormatter(logging.Formatter):
    """
    Colours the level name and message by severity.
    Plain text when colour is off or the stream is not a terminal.
    """

    DEFAULT_FMT = "%(asctime)s-%(levelname)s [%(name)s:%(funcName)s():%(lineno)d]: %(message)s"
    DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

    LEVEL_STYLE = {
        logging.DEBUG: ANSI["cyan"],
        logging.INFO: ANSI["light_green"],
        logging.WARNING: ANSI["yellow"],
        logging.ERROR: ANSI["red"],
        logging.CRITICAL: _BOLD + ANSI["red"],
    }

    def __init__(
                self,
                fmt: Optional[str] = None,
                datefmt: Optional[str] = None,
                use_color: Optional[bool] = None,
                stream: Optional[object] = None
                ):
        super().__init__(fmt or self.DEFAULT_FMT, datefmt or self.DEFAULT_DATEFMT)
        if use_color is None:
            use_color = _stream_supports_color(stream or sys.stdout)
            if sys.platform.startswith("win"):
                use_color = _enable_windows_ansi() and use_color
        self.use_color = bool(use_color)

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)

        style = self.LEVEL_STYLE.get(record.levelno, "")
        original_levelname = record.levelname
        original_msg, original_args = record.msg, record.args

        record.levelname = f"{style}{original_levelname}{_RESET}"
        record.msg = f"{style}{record.getMessage()}{_RESET}"
        record.args = None
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname
            record.msg, record.args = original_msg, original_args


# ########################################################################
# Configuration
# ########################################################################


def _resolve_level(level: Optional[int | str]) -> int:
    if level is None:
        level = os.getenv("PONTOS_LOG_LEVEL") or "INFO"
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logger(
                    name: str = BASE_NAME,
                    level: Optional[int | str] = None,
                    use_color: Optional[bool] = None,
                    filename: Optional[str] = None,
                    max_bytes: int = 5 * 1024 * 1024,
                    backup_count: int = 3,
                ) -> logging.Logger:
    """
    Configure and return a logger.

    Args:
        name: Logger name.
        level: Logging level or name. Defaults to env PONTOS_LOG_LEVEL or INFO.
        use_color: Force color on/off. Defaults to auto-detect.
        filename: Adds a RotatingFileHandler on this path. Defaults to env PONTOS_LOG_FILE.
        max_bytes: Rotation size.
        backup_count: Number of rotated backups to keep.
    """
    global __CONFIGURED

    level = _resolve_level(level)
    if filename is None:
        filename = os.getenv("PONTOS_LOG_FILE")
    if use_color is None and os.getenv("PONTOS_LOG_NO_COLOR"):
        use_color = False

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # --------------------------------------------------------------------
    # Reconfiguring replaces handlers instead of stacking them
    # --------------------------------------------------------------------
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    console = logging.StreamHandler(stream=sys.stdout)
    console.setLevel(level)
    console.setFormatter(ColorFormatter(use_color=use_color, stream=sys.stdout))
    logger.addHandler(console)

    if filename:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
                                                            filename,
                                                            maxBytes=max_bytes,
                                                            backupCount=backup_count,
                                                            encoding="utf-8"
                                                            )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(ColorFormatter.DEFAULT_FMT,
                                                    datefmt=ColorFormatter.DEFAULT_DATEFMT))
        logger.addHandler(file_handler)

    # Prevent double logging via root
    logger.propagate = False

    __CONFIGURED = True

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the package logger or one of its children; configures the base logger once.
    """
    global __CONFIGURED
    if not __CONFIGURED:
        configure_logger(BASE_NAME)
    return logging.getLogger(BASE_NAME if not name else f"{BASE_NAME}.{name}")


pontosLogger = get_logger()
