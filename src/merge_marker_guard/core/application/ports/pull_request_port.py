from abc import ABC, abstractmethod

from merge_marker_guard.core.domain.conflict import ChangedFile, PullRequestRef


class PullRequestPort(ABC):

    @abstractmethod
    def get_current_pull_request(self) -> PullRequestRef:
        """Resolve the pull request the check runs for."""

    @abstractmethod
    def list_files(self, pull_request: PullRequestRef) -> list[ChangedFile]:
        """Return every changed file, in the order the provider lists them."""
