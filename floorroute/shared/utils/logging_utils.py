"""Logging utilities for floorroute."""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List

from ..configuration.settings import LoggingSettings


def _level(name: str) -> int:
    return getattr(logging, name.upper())


def _build_handlers(settings: LoggingSettings) -> List[logging.Handler]:
    """Create the console and rotating-file handlers the settings ask for."""
    handlers: List[logging.Handler] = []
    if settings.console_output:
        handlers.append(logging.StreamHandler(sys.stdout))

    if settings.file_output:
        try:
            Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                filename=settings.log_file,
                maxBytes=settings.max_file_size_mb * 1024 * 1024,
                backupCount=settings.backup_count,
                encoding='utf-8'
            ))
        except OSError as e:
            # Console output still works; report once it is attached
            logging.getLogger(__name__).error(f"Cannot open log file {settings.log_file}: {e}")
    return handlers


def setup_logging(settings: LoggingSettings) -> None:
    """Replace the root logger's handlers with those described by settings.

    Component levels are applied last so that e.g. ``floorroute.algorithms``
    can be quieter than the root.
    """
    level = _level(settings.level)
    formatter = logging.Formatter(fmt=settings.format_string, datefmt=settings.date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in _build_handlers(settings):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for component, component_level in settings.component_levels.items():
        logging.getLogger(component).setLevel(_level(component_level))

    root_logger.debug(f"Logging configured at {settings.level.upper()}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes every message with ``[key=value ...]``."""

    def process(self, msg, kwargs):
        if self.extra:
            context_str = " ".join(f"{k}={v}" for k, v in self.extra.items())
            msg = f"[{context_str}] {msg}"
        return msg, kwargs


def get_context_logger(name: str, **context) -> ContextLogger:
    """Get a logger whose messages carry the given context, e.g. a search's endpoints."""
    return ContextLogger(get_logger(name), context)
