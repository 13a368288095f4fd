"""
Logging — structlog configuration and the library's log events.

railmonads never configures logging on import. Applications call
configure_structlog() once at startup (or configure structlog themselves);
the library only emits events through structlog.get_logger(), and only
once structlog is configured. Unconfigured, the library is silent.

Events:
  exception_captured  — a catching operation trapped an exception
  contract_violation  — or_throw() is about to raise
"""

from __future__ import annotations

import logging

import structlog

from railmonads.config import MonadSettings, get_settings, library_settings

log = structlog.get_logger()


def configure_structlog(log_level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog for console or JSON-formatted logging.

    Arguments default to the values in MonadSettings.
    In production: JSON lines to stdout (machine-readable).
    In development: colored, human-readable console output.
    """
    settings: MonadSettings = get_settings()
    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.log_format

    renderer: structlog.types.Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level, logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def log_captured(operation: str, exc: BaseException) -> None:
    """Record that a catching operation turned an exception into a failure."""
    if structlog.is_configured() and library_settings().log_captured_exceptions:
        log.debug(
            "exception_captured",
            operation=operation,
            exc_type=type(exc).__name__,
            exc_message=str(exc),
        )


def log_violation(operation: str, kind: str) -> None:
    """Record an or_throw() on the unhappy track, just before it raises."""
    if structlog.is_configured():
        log.debug("contract_violation", operation=operation, kind=kind)
