from dataclasses import dataclass, field

from merge_marker_guard.core.domain.conflict.conflict_occurrence import ConflictOccurrence
from merge_marker_guard.core.domain.conflict.file_status import FileStatus


@dataclass
class ChangedFile:
    """A file touched by the pull request, with the markers found in it."""

    name: str
    status: FileStatus
    patch: str | None = None
    conflicts: list[ConflictOccurrence] = field(default_factory=list)
    scanned: bool = False

    def __post_init__(self):
        if not self.name.strip():
            raise ValueError("A changed file needs a non-empty name.")

    def has_patch(self) -> bool:
        return bool(self.patch)

    def has_conflicts(self) -> bool:
        return len(self.conflicts) > 0

    def record_scan(self, occurrences) -> None:
        """Append the result of the single scan allowed for this file."""
        if self.scanned:
            raise ValueError(f"File '{self.name}' was already scanned.")
        self.scanned = True
        self.conflicts.extend(occurrences)
