"""Structured logging configuration using structlog.

Every culling pass runs for one document on one page. The CLI (or a host
renderer) records both with ``set_render_context`` before calling the
engine, and ``_add_correlation_ids`` stamps them on each event, so a
"Viewport culled" line can be traced to the snapshot and page it came from.
Output is JSON for log collectors or colored console text for development.
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from viewcull.config import settings

# Render correlation: document being culled and page shown on the stage
_document_id: ContextVar[str | None] = ContextVar("document_id", default=None)
_page: ContextVar[int | None] = ContextVar("page", default=None)


def set_render_context(
    document_id: str | None = None,
    page: int | None = None,
) -> None:
    """Record which document and page the following culling events belong to.

    Arguments left as None keep their current value, so a page change can
    be recorded without repeating the document id.

    Args:
        document_id: ``projectMeta.id`` of the snapshot being rendered.
        page: Page number currently shown on the stage.
    """
    if document_id is not None:
        _document_id.set(document_id)
    if page is not None:
        _page.set(page)


def clear_render_context() -> None:
    """Forget the current document and page, e.g. when a snapshot is closed."""
    _document_id.set(None)
    _page.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor adding document_id and page when they are set."""
    _ = logger, method_name  # Required by structlog processor signature
    document_id = _document_id.get()
    page = _page.get()

    if document_id is not None:
        event_dict["document_id"] = document_id
    if page is not None:
        event_dict["page"] = page

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to match, replacing handlers a host installed
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
