from merge_marker_guard.core.domain.conflict.changed_file import ChangedFile
from merge_marker_guard.core.domain.conflict.conflict_occurrence import (
    UNRESOLVED_LINE_NUMBER,
    ConflictOccurrence,
)
from merge_marker_guard.core.domain.conflict.file_status import FileStatus
from merge_marker_guard.core.domain.conflict.marker_kind import MarkerKind
from merge_marker_guard.core.domain.conflict.pull_request_ref import PullRequestRef
from merge_marker_guard.core.domain.conflict.scan_outcome import ScanOutcome

__all__ = [
    "UNRESOLVED_LINE_NUMBER",
    "ChangedFile",
    "ConflictOccurrence",
    "FileStatus",
    "MarkerKind",
    "PullRequestRef",
    "ScanOutcome",
]
