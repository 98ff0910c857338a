"""Application-layer exception hierarchy.

Workflows and entry points raise from this tree so callers can react to
failures by type instead of string matching.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application-layer errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class ConfigurationError(ApplicationError):
    """Raised when settings or the CI event do not describe a checkable pull request."""


class WorkflowExecutionError(ApplicationError):
    """Raised when the conflict check cannot complete."""
