from merge_marker_guard.core.application.workflows.conflict_check_workflow import (
    ConflictCheckWorkflow,
)

__all__ = ["ConflictCheckWorkflow"]
