"""Deterministic conflict check: Resolve -> List -> Scan -> Aggregate -> Report."""

from collections.abc import Iterable

import structlog
from structlog.contextvars import bind_contextvars

from merge_marker_guard.core.application.exceptions import (
    ApplicationError,
    ProviderError,
    WorkflowExecutionError,
)
from merge_marker_guard.core.application.ports import (
    FileContentPort,
    OutputPort,
    PullRequestPort,
)
from merge_marker_guard.core.domain.conflict import (
    ChangedFile,
    ConflictOccurrence,
    PullRequestRef,
    ScanOutcome,
)
from merge_marker_guard.core.domain.scanning import (
    is_eligible,
    matching_exclude_pattern,
    scan_content,
    scan_patch,
)

logger = structlog.get_logger()


class ConflictCheckWorkflow:
    """Scans every eligible file of the current pull request and reports the outcome."""

    def __init__(
        self,
        pull_requests: PullRequestPort,
        contents: FileContentPort,
        output: OutputPort,
        exclude_patterns: Iterable[str] = (),
    ) -> None:
        self._pull_requests = pull_requests
        self._contents = contents
        self._output = output
        self._exclude_patterns = tuple(exclude_patterns)

    def execute(self) -> ScanOutcome:
        pull_request, files = self._step_1_load_files()
        outcome = self._step_2_scan_files(pull_request, files)
        self._step_3_report(outcome)
        return outcome

    # ── Steps ─────────────────────────────────────────────────────────

    def _step_1_load_files(self) -> tuple[PullRequestRef, list[ChangedFile]]:
        try:
            pull_request = self._pull_requests.get_current_pull_request()
            bind_contextvars(pull_request=pull_request.identifier)
            logger.info(f"Checking PR {pull_request.identifier} for conflict markers...")
            files = self._pull_requests.list_files(pull_request)
        except (ApplicationError, ProviderError) as exc:
            raise WorkflowExecutionError(str(exc), context={"step": "load_files"}) from exc
        logger.info(f"Total files to check: {len(files)}")
        return pull_request, files

    def _step_2_scan_files(
        self, pull_request: PullRequestRef, files: list[ChangedFile]
    ) -> ScanOutcome:
        conflicted: list[str] = []
        checked = skipped = unavailable = 0
        for file in files:
            if self._should_skip(file):
                skipped += 1
                continue
            occurrences = self._scan(pull_request, file)
            if occurrences is None:
                unavailable += 1
                continue
            checked += 1
            file.record_scan(occurrences)
            if file.has_conflicts():
                conflicted.append(file.name)
                self._log_conflicts(file)
        return ScanOutcome(
            conflicted_files=tuple(conflicted),
            files_checked=checked,
            files_skipped=skipped,
            files_unavailable=unavailable,
        )

    def _step_3_report(self, outcome: ScanOutcome) -> None:
        if outcome.has_conflicts:
            self._output.report_failure(
                f"Found conflict markers in {len(outcome.conflicted_files)} file(s)"
            )
            self._output.set_conflicts_found(True)
            self._output.set_conflicted_files(list(outcome.conflicted_files))
            return
        logger.info(
            "No conflict markers found!",
            files_checked=outcome.files_checked,
            files_skipped=outcome.files_skipped,
        )
        self._output.set_conflicts_found(False)
        self._output.set_conflicted_files([])

    # ── Helpers ───────────────────────────────────────────────────────

    def _should_skip(self, file: ChangedFile) -> bool:
        if is_eligible(file, self._exclude_patterns):
            return False
        if file.status.is_removed:
            logger.info(f"Skipping {file.name} (file removed)")
        else:
            pattern = matching_exclude_pattern(file, self._exclude_patterns)
            logger.info(f"Skipping {file.name} (matches exclude pattern '{pattern}')")
        return True

    def _scan(
        self, pull_request: PullRequestRef, file: ChangedFile
    ) -> list[ConflictOccurrence] | None:
        """Scan the patch when there is one, otherwise the full file at the head commit."""
        if file.has_patch():
            return list(scan_patch(file.patch))
        logger.info(f"Patch not available for {file.name}, fetching full content...")
        content = self._contents.get_file_content(pull_request, file)
        if content is None:
            logger.warning(f"Could not fetch content for {file.name}", file=file.name)
            return None
        return list(scan_content(content))

    @staticmethod
    def _log_conflicts(file: ChangedFile) -> None:
        for conflict in file.conflicts:
            location = f" at line {conflict.line_number}" if conflict.has_line_number else ""
            logger.error(
                f"Conflict marker found in {file.name}{location}: {conflict.raw_text}",
                file=file.name,
                line=conflict.line_number if conflict.has_line_number else None,
            )
