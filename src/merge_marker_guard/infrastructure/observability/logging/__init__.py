from merge_marker_guard.infrastructure.observability.logging.workflow_command_renderer import (
    workflow_command_renderer,
)

__all__ = ["workflow_command_renderer"]
