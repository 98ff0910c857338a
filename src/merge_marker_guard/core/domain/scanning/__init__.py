from merge_marker_guard.core.domain.scanning.file_eligibility import (
    is_eligible,
    matching_exclude_pattern,
)
from merge_marker_guard.core.domain.scanning.file_scanner import scan_content, scan_patch
from merge_marker_guard.core.domain.scanning.marker_classifier import (
    CONFLICT_MARKERS,
    classify_marker,
    is_marker_line,
)

__all__ = [
    "CONFLICT_MARKERS",
    "classify_marker",
    "is_eligible",
    "is_marker_line",
    "matching_exclude_pattern",
    "scan_content",
    "scan_patch",
]
