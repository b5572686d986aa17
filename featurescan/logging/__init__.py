"""
featurescan logging

Structured logging for the analyzer, kept separate from the console output of
the CLI commands.

Provides:
- Structured logging (NDJSON and text formats)
- Configuration from file, environment variables or explicit overrides
- Context fields (e.g. the feature file being analyzed)

Usage:
    from featurescan.logging import get_logger

    logger = get_logger("featurescan.readers")
    logger.info("Feature parsed", file="login.feature", scenarios=3)

Configuration:
    export FEATURESCAN_LOG_ENABLED=true
    export FEATURESCAN_LOG_LEVEL=DEBUG
    export FEATURESCAN_LOG_FORMAT=text
"""

from featurescan.logging.structured_logger import LoggerFactory, StructuredLogger, LogLevel

__all__ = [
    "LoggerFactory",
    "StructuredLogger",
    "LogLevel",
    "get_logger",
]


def get_logger(name: str) -> StructuredLogger:
    """
    Get a logger instance with default configuration.

    Args:
        name: Logger name (usually module path like "featurescan.analyzer")

    Returns:
        StructuredLogger instance
    """
    return LoggerFactory.get_logger(name)
