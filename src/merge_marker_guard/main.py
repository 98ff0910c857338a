import sys

from pydantic import ValidationError

from merge_marker_guard.core.application.exceptions import WorkflowExecutionError
from merge_marker_guard.core.application.workflows import ConflictCheckWorkflow
from merge_marker_guard.infrastructure.common.retry import RetryPolicy
from merge_marker_guard.infrastructure.configuration import Settings
from merge_marker_guard.infrastructure.observability import configure_logging, get_logger
from merge_marker_guard.infrastructure.tools.output import ActionsOutputAdapter
from merge_marker_guard.infrastructure.tools.vcs.github import (
    GitHubContentClient,
    GitHubHttpClient,
    GitHubPullRequestClient,
)

logger = get_logger(__name__)


def build_workflow(settings: Settings, output: ActionsOutputAdapter) -> ConflictCheckWorkflow:
    """Wire the GitHub adapters into the conflict check."""
    http_client = GitHubHttpClient(settings)
    retry_policy = RetryPolicy(max_attempts=settings.max_retries + 1)
    return ConflictCheckWorkflow(
        pull_requests=GitHubPullRequestClient(http_client, settings, retry_policy),
        contents=GitHubContentClient(http_client, retry_policy),
        output=output,
        exclude_patterns=settings.exclude_pattern_list(),
    )


def main(settings: Settings | None = None) -> int:
    try:
        settings = settings if settings is not None else Settings()
    except ValidationError as exc:
        configure_logging()
        output = ActionsOutputAdapter()
        output.report_failure(f"Invalid configuration: {exc}")
        return output.exit_code

    configure_logging(settings.log_format)
    output = ActionsOutputAdapter(settings.github_output)
    try:
        build_workflow(settings, output).execute()
    except (WorkflowExecutionError, ValueError) as exc:
        output.report_failure(str(exc))
    return output.exit_code


def run() -> None:
    """Console entry point."""
    sys.exit(main())
