"""
Structured Logger

Writes one log entry per line, either as NDJSON or as human-readable text.

Usage:
    from featurescan.logging.structured_logger import LoggerFactory

    logger = LoggerFactory.get_logger("featurescan.analyzer")
    logger.info("Analysis finished", files=12, scenarios=48)

    file_logger = logger.with_context(file="features/login.feature")
    file_logger.warning("Unknown keyword", line=7)
"""

import json
import sys
import traceback
from datetime import datetime, timezone
from typing import Dict, Any, Optional, TextIO
from enum import IntEnum

FORMAT_STYLES = ("json", "text")
ENTRY_HEADER = ("timestamp", "level", "logger", "message")


class LogLevel(IntEnum):
    """Standard log levels compatible with Python logging"""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


def _exception_fields() -> Optional[Dict[str, str]]:
    exc_type, exc_value, exc_tb = sys.exc_info()
    if exc_type is None:
        return None
    return {
        "type": exc_type.__name__,
        "message": str(exc_value),
        "traceback": "".join(traceback.format_tb(exc_tb)),
    }


class StructuredLogger:
    """
    Logger writing one NDJSON or text line per entry to a stream.

    Fields passed as keyword arguments are added to the entry, fields set to
    None are left out. Context fields given to with_context are repeated on
    every entry of the derived logger.

    Example:
        logger = StructuredLogger("featurescan.readers", level=LogLevel.INFO)
        logger.info("Feature parsed", file="login.feature", scenarios=3)

        # Output:
        # {"timestamp":"2024-01-20T10:15:30.123456+00:00","level":"INFO","logger":"featurescan.readers","message":"Feature parsed","file":"login.feature","scenarios":3}
    """

    def __init__(
        self, name: str, level: LogLevel = LogLevel.INFO, output_stream: TextIO = None, format_style: str = "json"
    ):
        self.name = name
        self.level = level
        self.output_stream = output_stream or sys.stderr
        self.format_style = format_style
        self._context: Dict[str, Any] = {}

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _entry(self, level: LogLevel, message: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level.name,
            "logger": self.name,
            "message": message,
        }
        entry.update(self._context)
        entry.update({key: value for key, value in fields.items() if value is not None})
        return entry

    def _render(self, entry: Dict[str, Any]) -> str:
        if self.format_style == "json":
            return json.dumps(entry, default=str, ensure_ascii=False)

        line = "{} {} {} | {}".format(
            entry["timestamp"], f"[{entry['level']}]".ljust(10), self.name.ljust(20), entry["message"]
        )
        fields = " ".join(f"{key}={value}" for key, value in entry.items() if key not in ENTRY_HEADER)
        return f"{line} | {fields}" if fields else line

    def log(self, level: LogLevel, message: str, exc_info: bool = False, **fields):
        """
        Write one entry if level passes the logger's threshold.

        Args:
            level: Log level of the entry
            message: Log message
            exc_info: Add the exception being handled under "exception"
            **fields: Additional structured fields
        """
        if not self.is_enabled_for(level):
            return
        if exc_info:
            fields["exception"] = _exception_fields()
        self.output_stream.write(self._render(self._entry(level, message, fields)) + "\n")
        self.output_stream.flush()

    def debug(self, message: str, **fields):
        self.log(LogLevel.DEBUG, message, **fields)

    def info(self, message: str, **fields):
        self.log(LogLevel.INFO, message, **fields)

    def warning(self, message: str, **fields):
        self.log(LogLevel.WARNING, message, **fields)

    def error(self, message: str, exc_info: bool = False, **fields):
        self.log(LogLevel.ERROR, message, exc_info=exc_info, **fields)

    def critical(self, message: str, exc_info: bool = False, **fields):
        self.log(LogLevel.CRITICAL, message, exc_info=exc_info, **fields)

    def with_context(self, **context) -> "StructuredLogger":
        """Returns a logger sharing this one's settings, with context fields added"""
        derived = StructuredLogger(self.name, self.level, self.output_stream, self.format_style)
        derived._context = {**self._context, **context}
        return derived


class LoggerFactory:
    """
    Creates and caches loggers sharing one configuration.

    configure() applies to loggers created later and to the cached ones.
    Loggers derived with with_context keep the settings they were created with.
    """

    _default_level = LogLevel.INFO
    _default_format = "json"
    _default_stream = sys.stderr
    _loggers: Dict[str, StructuredLogger] = {}

    @classmethod
    def configure(cls, level: str = "INFO", format_style: str = "json", stream: TextIO = None):
        """
        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            format_style: Output format - "json" or "text"
            stream: Output stream, the current one is kept when omitted
        """
        level_upper = level.upper()
        if level_upper not in LogLevel.__members__:
            raise ValueError(f"Invalid log level: {level}. Must be one of: {', '.join(LogLevel.__members__)}")
        if format_style not in FORMAT_STYLES:
            raise ValueError(f"Invalid format style: {format_style}. Must be 'json' or 'text'")

        cls._default_level = LogLevel[level_upper]
        cls._default_format = format_style
        if stream:
            cls._default_stream = stream

        for logger in cls._loggers.values():
            logger.level = cls._default_level
            logger.format_style = cls._default_format
            logger.output_stream = cls._default_stream

    @classmethod
    def get_logger(cls, name: str) -> StructuredLogger:
        if name not in cls._loggers:
            cls._loggers[name] = StructuredLogger(name, cls._default_level, cls._default_stream, cls._default_format)
        return cls._loggers[name]

    @classmethod
    def reset(cls):
        """Restores the defaults and drops the cached loggers. Used by tests."""
        cls._default_level = LogLevel.INFO
        cls._default_format = "json"
        cls._default_stream = sys.stderr
        cls._loggers = {}
