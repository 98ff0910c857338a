from merge_marker_guard.infrastructure.tools.output.actions_output_adapter import (
    ActionsOutputAdapter,
)

__all__ = ["ActionsOutputAdapter"]
