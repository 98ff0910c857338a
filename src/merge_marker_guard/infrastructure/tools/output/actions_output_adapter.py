import uuid
from pathlib import Path

from merge_marker_guard.core.application.ports import OutputPort
from merge_marker_guard.infrastructure.observability import get_logger

logger = get_logger(__name__)

OUTPUT_CONFLICTS = "conflicts"
OUTPUT_CONFLICTED_FILES = "conflicted-files"


class ActionsOutputAdapter(OutputPort):
    """Result sink writing GitHub Actions step outputs and tracking the exit status."""

    def __init__(self, output_file: Path | None = None):
        self.output_file = output_file
        self.failed = False
        self.failure_message: str | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def set_conflicts_found(self, found: bool) -> None:
        self._set_output(OUTPUT_CONFLICTS, str(found).lower())

    def set_conflicted_files(self, files: list[str]) -> None:
        self._set_output(OUTPUT_CONFLICTED_FILES, ",".join(files))

    def report_failure(self, message: str) -> None:
        self.failed = True
        self.failure_message = message
        logger.error(message)

    def _set_output(self, name: str, value: str) -> None:
        if self.output_file is None:
            logger.info(f"Output {name}={value}")
            return
        with self.output_file.open("a", encoding="utf-8") as handle:
            handle.write(_format_output(name, value))


def _format_output(name: str, value: str) -> str:
    if "\n" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
