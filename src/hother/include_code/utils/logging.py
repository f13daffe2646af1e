"""
Logging utilities for the include-code library.
"""

import logging
import sys

import structlog

DEFAULT_LOGGER_NAME = "hother.include_code"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name

    Returns:
        A structlog bound logger
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", DEFAULT_LOGGER_NAME)
        else:
            name = DEFAULT_LOGGER_NAME

    return structlog.get_logger(name)


def _renderer(json_output: bool, dev_mode: bool) -> structlog.typing.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    if dev_mode:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.KeyValueRenderer(key_order=["event", "logger", "level"])


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    dev_mode: bool = True,
) -> None:
    """
    Configure structured logging for documentation builds.

    Extraction events are emitted at DEBUG, unresolved invocations at
    WARNING, so INFO keeps a normal build quiet.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: Whether to output JSON lines
        dev_mode: Whether to use dev-friendly console output
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        stream=sys.stderr,
        format="%(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(json_output, dev_mode),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
