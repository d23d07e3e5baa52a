"""
Structured Logging
==================
structlog integration for run-level events. Events are rendered by structlog
and handed to the stdlib ``logging`` tree, so the handlers and levels set up by
``setup_logging`` apply to them.

Usage:
    from shiftrota.utils.structured_logging import get_structured_logger

    log = get_structured_logger("shiftrota.engine")
    log.info("assignment_started", people=12, cells=42)
"""
from typing import Any

import structlog
import structlog.contextvars


def configure_structlog(json_output: bool = False) -> None:
    """
    Configure structlog for the application.

    Args:
        json_output: If True, render events as JSON lines (for production).
                    If False, render ``key=value`` pairs (for development).
    """
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.processors.KeyValueRenderer(key_order=["event"])

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_structured_logger(name: str) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name``."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind context variables for all subsequent structured log calls.

    Args:
        **kwargs: Context values (e.g., run_id="abc123")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()


# Default configuration: key=value events through stdlib logging
configure_structlog()
