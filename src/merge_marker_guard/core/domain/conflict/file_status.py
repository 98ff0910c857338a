from enum import StrEnum


class FileStatus(StrEnum):
    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"
    COPIED = "copied"
    CHANGED = "changed"
    UNCHANGED = "unchanged"

    @classmethod
    def from_string(cls, value: str | None) -> "FileStatus":
        """Normalize a provider status; anything unknown becomes UNCHANGED."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.UNCHANGED

    @property
    def is_removed(self) -> bool:
        return self is FileStatus.REMOVED
