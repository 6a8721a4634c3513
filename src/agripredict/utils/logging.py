"""
Structured logging for training and prediction.

Library modules only call get_logger(); the CLI configures output once
per invocation. Log lines go to stderr so command output on stdout stays
clean.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from agripredict.config.settings import LoggingConfig

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _stderr_logger(*_: Any) -> structlog.PrintLogger:
    # Resolved per logger so redirected streams (test runners) are honoured
    return structlog.PrintLogger(file=sys.stderr)


def _output_processors(json_output: bool) -> list[structlog.types.Processor]:
    if json_output:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structured logging.

    Args:
        level: Log level name; unknown names fall back to INFO.
        json_output: Emit one JSON object per line instead of console text.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, *_output_processors(json_output)],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def configure_from_settings(config: "LoggingConfig") -> None:
    """Configure logging from the logging section of AppConfig."""
    configure_logging(config.level, config.json_output)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, typically named after the module."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> structlog.contextvars.bound_contextvars:
    """
    Bind key-value pairs to every log line emitted inside the block.

    Example:
        with log_context(task="yield"):
            log.info("Training complete")  # includes task="yield"
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
