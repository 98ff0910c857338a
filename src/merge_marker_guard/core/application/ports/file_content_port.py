from abc import ABC, abstractmethod

from merge_marker_guard.core.domain.conflict import ChangedFile, PullRequestRef


class FileContentPort(ABC):

    @abstractmethod
    def get_file_content(self, pull_request: PullRequestRef, file: ChangedFile) -> str | None:
        """Return the file text at the pull request head, or None when unavailable."""
