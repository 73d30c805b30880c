"""Observability: structured logging."""

from gravity_engine.observability.logging import (
    configure_logging,
    render_weights,
    session_context,
)

__all__ = [
    "configure_logging",
    "render_weights",
    "session_context",
]
