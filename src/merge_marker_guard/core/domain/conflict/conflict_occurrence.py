from dataclasses import dataclass

from merge_marker_guard.core.domain.conflict.marker_kind import MarkerKind

# Patch hunks are not mapped back to destination-file lines.
UNRESOLVED_LINE_NUMBER = 0


@dataclass(frozen=True)
class ConflictOccurrence:
    """One marker line found while scanning a file."""

    line_number: int
    raw_text: str
    marker_kind: MarkerKind

    def __post_init__(self):
        if self.line_number < 0:
            raise ValueError(f"Invalid line number: {self.line_number}")

    @property
    def has_line_number(self) -> bool:
        return self.line_number != UNRESOLVED_LINE_NUMBER
