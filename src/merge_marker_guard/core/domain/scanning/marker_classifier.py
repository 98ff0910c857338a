"""Pure functions deciding whether a line is a merge-conflict marker.

Markers are matched as a prefix after leading indentation only. Matching
anywhere in the line would flag prose or comments that merely contain a run
of ``=`` characters, while exact-line matching would miss the branch label
written after ``<<<<<<<`` and ``>>>>>>>``.
"""

from merge_marker_guard.core.domain.conflict import MarkerKind

CONFLICT_MARKERS: tuple[MarkerKind, ...] = tuple(MarkerKind)


def classify_marker(line: str) -> MarkerKind | None:
    """Return the marker kind the line starts with, or None."""
    trimmed_line = line.lstrip()
    for marker in CONFLICT_MARKERS:
        if trimmed_line.startswith(marker.value):
            return marker
    return None


def is_marker_line(line: str) -> bool:
    return classify_marker(line) is not None
