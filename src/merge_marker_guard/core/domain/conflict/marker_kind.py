from enum import StrEnum


class MarkerKind(StrEnum):
    """The three marker tokens a merge tool writes around a conflicting region."""

    START = "<<<<<<<"
    SEPARATOR = "======="
    END = ">>>>>>>"
