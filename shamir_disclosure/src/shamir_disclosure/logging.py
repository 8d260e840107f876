"""structlog setup for the shamir-disclosure CLI.

Command output (the reconstructed secret) owns stdout, so log records go to
stderr unless another stream is passed in.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional

import structlog

_COMPONENT = "shamir_disclosure"
_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def configure_logging(level: Optional[str] = None, stream: Optional[IO[str]] = None) -> None:
    """Emit JSON lines with ``level``, ``ts``, ``msg`` and ``component`` keys."""

    numeric_level = _LEVELS.get((level or "info").lower(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(stream if stream is not None else sys.stderr)],
        format="%(message)s",
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str = _COMPONENT) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(component)


def _add_component(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    event_dict.setdefault("component", getattr(logger, "name", None) or _COMPONENT)
    return event_dict


__all__ = ["configure_logging", "get_logger"]
