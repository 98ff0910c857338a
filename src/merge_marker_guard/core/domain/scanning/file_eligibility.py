from collections.abc import Iterable

from merge_marker_guard.core.domain.conflict import ChangedFile


def matching_exclude_pattern(file: ChangedFile, exclude_patterns: Iterable[str]) -> str | None:
    """Return the first literal, case-sensitive pattern contained in the file name."""
    return next((pattern for pattern in exclude_patterns if pattern in file.name), None)


def is_eligible(file: ChangedFile, exclude_patterns: Iterable[str]) -> bool:
    """Removed files and files matching an exclusion substring are not scanned."""
    if file.status.is_removed:
        return False
    return matching_exclude_pattern(file, exclude_patterns) is None
