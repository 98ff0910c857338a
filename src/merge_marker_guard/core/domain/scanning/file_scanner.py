"""Scanners turning a patch or a full file into conflict-marker occurrences."""

from collections.abc import Iterator

from merge_marker_guard.core.domain.conflict import (
    UNRESOLVED_LINE_NUMBER,
    ConflictOccurrence,
)
from merge_marker_guard.core.domain.scanning.marker_classifier import classify_marker

_ADDED_LINE_PREFIX = "+"
_FILE_HEADER_PREFIX = "+++"


def scan_content(text: str) -> Iterator[ConflictOccurrence]:
    """Yield every marker line in ``text`` with its 1-based line number."""
    for index, line in enumerate(text.split("\n"), start=1):
        marker_kind = classify_marker(line)
        if marker_kind is not None:
            yield ConflictOccurrence(index, line.strip(), marker_kind)


def scan_patch(patch_text: str) -> Iterator[ConflictOccurrence]:
    """Yield markers on the lines a unified diff adds.

    Context and removed lines are ignored so that markers already present in
    the base revision are not blamed on this change. Hunk headers are not
    parsed, so occurrences carry ``UNRESOLVED_LINE_NUMBER``.
    """
    for line in patch_text.split("\n"):
        if not _is_added_line(line):
            continue
        added_content = line[len(_ADDED_LINE_PREFIX):]
        marker_kind = classify_marker(added_content)
        if marker_kind is not None:
            yield ConflictOccurrence(UNRESOLVED_LINE_NUMBER, added_content.strip(), marker_kind)


def _is_added_line(line: str) -> bool:
    return line.startswith(_ADDED_LINE_PREFIX) and not line.startswith(_FILE_HEADER_PREFIX)
