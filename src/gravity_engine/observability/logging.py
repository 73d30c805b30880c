"""Structured logging for the gravity engine and CLI.

Engine modules log through ``structlog.get_logger()`` and never configure
anything themselves. The CLI calls ``configure_logging`` once per command and
wraps the command body in ``session_context`` so every engine event it
triggers carries the same ``session_id`` and ``command``.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bind_contextvars, merge_contextvars, unbind_contextvars

from gravity_core.models.weights import DIMENSIONS, MatchWeights

if TYPE_CHECKING:
    from gravity_core.config.settings import Settings

_SESSION_KEYS = ("session_id", "command")


def render_weights(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Render any MatchWeights value in the event as ``skills/compensation/culture``."""
    for key, value in event_dict.items():
        if isinstance(value, MatchWeights):
            event_dict[key] = "/".join(str(value.get(d)) for d in DIMENSIONS)
    return event_dict


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through one console or JSON handler."""
    shared_processors: list[structlog.types.Processor] = [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        render_weights,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(settings.log_level))


@contextmanager
def session_context(command: str, session_id: str | None = None) -> Iterator[str]:
    """Tag log events emitted inside the block with a session id and command name.

    A short random id is generated when none is given. Only the keys bound
    here are removed on exit; other context vars are left alone.
    """
    sid = session_id or uuid.uuid4().hex[:12]
    bind_contextvars(session_id=sid, command=command)
    try:
        yield sid
    finally:
        unbind_contextvars(*_SESSION_KEYS)


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO
