"""Structured logging for analysis runs.

Output goes through stdlib logging on stderr so it never mixes with CLI
results on stdout. Two renderers:
- "console": human-readable, colored only on a TTY
- "json": one JSON object per line

Inside run_context() every entry carries ``run_id`` plus the pair and
timeframe being analyzed.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

import structlog

_run_id: ContextVar[str] = ContextVar("run_id", default="")

# HTTP client libraries log every request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore")


def get_run_id() -> str:
    """Run ID of the analysis in flight ("" outside a run)."""
    return _run_id.get()


@contextmanager
def run_context(run_id: str, *, pair: str, timeframe: str) -> Iterator[None]:
    """Tag log entries emitted in this block with the run's identity.

    Restores the previous context on exit, including on error.
    """
    token = _run_id.set(run_id)
    try:
        with structlog.contextvars.bound_contextvars(
            pair=pair,
            timeframe=timeframe,
        ):
            yield
    finally:
        _run_id.reset(token)


def _add_run_id(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: structlog.types.EventDict,
) -> structlog.types.EventDict:
    run_id = get_run_id()
    if run_id:
        event_dict["run_id"] = run_id
    return event_dict


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    raise ValueError(f"Unknown log format: {log_format!r}")


def setup_logging(level: str = "INFO", log_format: str = "console") -> None:
    """Route structlog through stdlib logging on stderr.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: "json" or "console".

    Raises:
        ValueError: Unknown level or format.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    renderer = _renderer(log_format)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _add_run_id,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    noisy_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structlog logger."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
