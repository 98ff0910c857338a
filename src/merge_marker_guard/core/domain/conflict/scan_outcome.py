from dataclasses import dataclass


@dataclass(frozen=True)
class ScanOutcome:
    """Result of one run: the offending files in the order they were listed."""

    conflicted_files: tuple[str, ...] = ()
    files_checked: int = 0
    files_skipped: int = 0
    files_unavailable: int = 0

    @property
    def has_conflicts(self) -> bool:
        return len(self.conflicted_files) > 0
