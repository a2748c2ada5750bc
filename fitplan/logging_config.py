"""Central logging configuration for the fitness plan service."""
from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path

from pydantic import ValidationError

from fitplan.config import get_settings

_configured = False

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILENAME = "fitplan.log"

# SDK and HTTP transport loggers; they log every request at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "anthropic")


def build_logging_config(level: str, log_dir: Path | None) -> dict:
    """
    Build the dictConfig payload for the service.

    Args:
        level: Root log level name
        log_dir: Directory for the log file, or None for console-only output

    Returns:
        dict accepted by ``logging.config.dictConfig``
    """
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
        },
    }
    if log_dir is not None:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(log_dir / LOG_FILENAME),
            "encoding": "utf-8",
            "formatter": "standard",
            "level": level,
        }

    # Transport chatter stays hidden unless the whole service runs at DEBUG.
    quiet_level = "DEBUG" if level == "DEBUG" else "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "loggers": {name: {"level": quiet_level} for name in _QUIET_LOGGERS},
        "root": {"level": level, "handlers": list(handlers)},
    }


def configure_logging(level: str | None = None) -> None:
    """Configure application logging once per process; ``level`` overrides LOG_LEVEL."""

    global _configured
    if _configured:
        return

    try:
        settings = get_settings()
        log_dir = settings.log_dir if settings.log_to_file else None
        configured_level = settings.log_level
    except ValidationError:
        # A malformed environment should not prevent log output about it.
        log_dir = None
        configured_level = "INFO"

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(build_logging_config((level or configured_level).upper(), log_dir))
    _configured = True
