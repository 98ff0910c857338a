from abc import ABC, abstractmethod


class OutputPort(ABC):

    @abstractmethod
    def set_conflicts_found(self, found: bool) -> None:
        pass

    @abstractmethod
    def set_conflicted_files(self, files: list[str]) -> None:
        pass

    @abstractmethod
    def report_failure(self, message: str) -> None:
        """Mark the check as failed with a human-readable reason."""
