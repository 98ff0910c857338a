from merge_marker_guard.core.application.exceptions.guard_exceptions import (
    ApplicationError,
    ConfigurationError,
    WorkflowExecutionError,
)
from merge_marker_guard.core.application.exceptions.provider_error import ProviderError

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ProviderError",
    "WorkflowExecutionError",
]
