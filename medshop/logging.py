"""
Logging setup for medshop.

Everything logs through stdlib `logging`. `configure_logging()` installs one
stdout handler on the root logger; it runs on import and leaves a root logger
that someone else (uvicorn, pytest) already configured untouched.

    from medshop.logging import get_logger, sanitize_id_for_logging
    logger = get_logger(__name__)
    logger.info(f"Cart saved for {sanitize_id_for_logging(session_id)}")
"""

import logging
import os
import sys
from functools import cache
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
# Hosted runtimes (Vercel) stamp each line themselves
LOG_FORMAT_HOSTED = "%(levelname)s [%(name)s] %(message)s"

# Client libraries under supabase and upstash log one line per request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "postgrest", "supabase", "realtime")

ID_LOG_LENGTH = 8
MISSING = "N/A"

# C0 control characters are escaped so user input cannot start a new log line (CWE-117)
_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in range(32)}
_CONTROL_ESCAPES.update({ord("\n"): "\\n", ord("\r"): "\\r", ord("\t"): "\\t", 0: None})


def _level_from_env() -> int:
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> Optional[logging.Handler]:
    """
    Attach the medshop handler to the root logger.

    Args:
        level: Root level; LOG_LEVEL from the environment when omitted
        stream: Handler stream, stdout by default
        force: Replace handlers that are already installed

    Returns:
        The installed handler, or None when the root logger was left as is
    """
    root = logging.getLogger()
    if root.handlers and not force:
        return None
    for existing in list(root.handlers):
        root.removeHandler(existing)

    level = _level_from_env() if level is None else level
    hosted = os.environ.get("VERCEL") == "1"

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_HOSTED if hosted else LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return handler


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _clean(value, max_length: int, suffix: str) -> str:
    if not value:
        return MISSING
    text = str(value).translate(_CONTROL_ESCAPES)
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def sanitize_id_for_logging(id_value: str | None) -> str:
    """First 8 characters of an identifier, control characters escaped."""
    return _clean(id_value, ID_LOG_LENGTH, "")


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Free text (product names, slot keys) cut to max_length with an ellipsis."""
    return _clean(value, max_length, "...")


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_HOSTED",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
