"""Structlog renderer emitting GitHub Actions workflow commands.

Warnings and errors become ``::warning``/``::error`` annotations so they show
up on the pull request; ``file`` and ``line`` keys become annotation
properties. Info lines are printed as plain text.
"""

from __future__ import annotations

from typing import Any

_COMMANDS = {
    "debug": "debug",
    "warning": "warning",
    "error": "error",
    "critical": "error",
    "exception": "error",
}
_PROPERTY_KEYS = ("file", "line", "title")
_DROPPED_KEYS = ("timestamp", "context_component")


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def _format_extra(event_dict: dict[str, Any]) -> str:
    return " ".join(f"{key}={value}" for key, value in sorted(event_dict.items()))


def workflow_command_renderer(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> str:
    """Render the event as a workflow command line."""
    level = str(event_dict.pop("level", "info")).lower()
    message = str(event_dict.pop("event", ""))
    for key in _DROPPED_KEYS:
        event_dict.pop(key, None)

    properties = {
        key: event_dict.pop(key) for key in _PROPERTY_KEYS if event_dict.get(key) is not None
    }
    for key in _PROPERTY_KEYS:
        event_dict.pop(key, None)

    extra = _format_extra(event_dict)
    text = f"{message} {extra}" if extra else message

    command = _COMMANDS.get(level)
    if command is None:
        return text
    props = ",".join(f"{key}={escape_property(str(value))}" for key, value in properties.items())
    return f"::{command}{' ' + props if props else ''}::{escape_data(text)}"
