"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns bound structlog logger
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from merge_marker_guard.infrastructure.observability.logging import workflow_command_renderer

_CONFIGURED = False


def configure_logging(log_format: str | None = None, level: int = logging.INFO) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Renderer is selected by ``log_format`` (json|console|github), then the
    LOG_FORMAT env, then whether the process runs inside GitHub Actions.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer(log_format)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: httpx and other libraries log through the same renderer
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)


def get_logger(component: str) -> Any:
    """Return a lazy structlog logger carrying context_component."""
    return structlog.get_logger(context_component=component)


def _select_renderer(log_format: str | None = None) -> Any:
    """Choose renderer from the explicit format, LOG_FORMAT env or GITHUB_ACTIONS."""
    chosen = (log_format or os.environ.get("LOG_FORMAT", "")).lower()
    if chosen == "json":
        return structlog.processors.JSONRenderer()
    if chosen == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    if chosen == "github":
        return workflow_command_renderer

    if os.environ.get("GITHUB_ACTIONS", "").lower() == "true":
        return workflow_command_renderer
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
