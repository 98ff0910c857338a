import json
import time
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from merge_marker_guard.core.application.exceptions import ConfigurationError
from merge_marker_guard.core.application.ports import PullRequestPort
from merge_marker_guard.core.domain.conflict import ChangedFile, FileStatus, PullRequestRef
from merge_marker_guard.infrastructure.common.retry import RetryPolicy
from merge_marker_guard.infrastructure.configuration import Settings
from merge_marker_guard.infrastructure.observability import get_logger
from merge_marker_guard.infrastructure.tools.vcs.github.github_http_client import GitHubHttpClient
from merge_marker_guard.infrastructure.tools.vcs.github.github_rate_limit import (
    LOW_REMAINING_THRESHOLD,
    remaining_requests,
)

logger = get_logger(__name__)

# The pull request files endpoint stops listing after this many entries.
MAX_LISTED_FILES = 3000
PAGE_PAUSE_EVERY = 10
PAGE_PAUSE_SECONDS = 0.2


class GitHubPullRequestClient(PullRequestPort):
    """Pull request source backed by the GitHub REST API and the Actions event payload."""

    def __init__(
        self,
        client: GitHubHttpClient,
        settings: Settings,
        retry_policy: RetryPolicy | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.settings = settings
        self.retry_policy = retry_policy or RetryPolicy(max_attempts=settings.max_retries + 1)
        self._sleep = sleep

    # ── Pull request resolution ──

    def get_current_pull_request(self) -> PullRequestRef:
        payload = self._load_event_payload()
        owner, repo = self._resolve_repository(payload)
        pr_payload = payload.get("pull_request") or {}

        number = self.settings.pull_number or pr_payload.get("number")
        if not number:
            raise ConfigurationError(
                "This action can only be run on pull requests",
                context={"event_path": str(self.settings.github_event_path)},
            )
        head_sha = self.settings.head_sha or (pr_payload.get("head") or {}).get("sha")
        if not head_sha:
            head_sha = self._fetch_head_sha(owner, repo, int(number))
        return PullRequestRef(owner=owner, repo=repo, number=int(number), head_sha=head_sha)

    def _load_event_payload(self) -> dict[str, Any]:
        path = self.settings.github_event_path
        if path is None or not path.is_file():
            return {}
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Event payload at {path} is not valid JSON", context={"event_path": str(path)}
            ) from exc
        return payload if isinstance(payload, dict) else {}

    def _resolve_repository(self, payload: dict[str, Any]) -> tuple[str, str]:
        full_name = self.settings.github_repository or (payload.get("repository") or {}).get(
            "full_name", ""
        )
        owner, _, repo = full_name.partition("/")
        if not owner or not repo:
            raise ConfigurationError(
                "Repository is unknown; set GITHUB_REPOSITORY to 'owner/repo'",
                context={"github_repository": full_name},
            )
        return owner, repo

    def _fetch_head_sha(self, owner: str, repo: str, number: int) -> str:
        path = f"repos/{owner}/{repo}/pulls/{number}"
        response = self.retry_policy.run(lambda: self.client.get(path))
        try:
            return response.json()["head"]["sha"]
        except (ValueError, KeyError, TypeError) as exc:
            raise ConfigurationError(
                f"Could not read the head commit of pull request #{number}",
                context={"path": path},
            ) from exc

    # ── Changed files ──

    def list_files(self, pull_request: PullRequestRef) -> list[ChangedFile]:
        path = f"repos/{pull_request.owner}/{pull_request.repo}/pulls/{pull_request.number}/files"
        per_page = self.settings.files_per_page
        all_files: list[ChangedFile] = []
        page = 1

        while True:
            params = {"per_page": per_page, "page": page}
            response = self.retry_policy.run(lambda: self.client.get(path, params=params))
            self._warn_on_low_rate_limit(response.headers)

            entries = response.json()
            all_files.extend(self._to_changed_file(entry) for entry in entries)

            if len(entries) < per_page:
                break

            page += 1
            logger.info(f"Fetched {len(all_files)} files so far...")
            if page % PAGE_PAUSE_EVERY == 1:
                logger.debug("Adding delay to avoid rate limits...")
                self._sleep(PAGE_PAUSE_SECONDS)

        if len(all_files) >= MAX_LISTED_FILES:
            logger.warning(
                f"Pull request lists {len(all_files)} files; GitHub does not return more "
                f"than {MAX_LISTED_FILES}, remaining files were not checked"
            )
        return all_files

    @staticmethod
    def _to_changed_file(entry: dict[str, Any]) -> ChangedFile:
        return ChangedFile(
            name=entry["filename"],
            status=FileStatus.from_string(entry.get("status")),
            patch=entry.get("patch"),
        )

    @staticmethod
    def _warn_on_low_rate_limit(headers) -> None:
        remaining = remaining_requests(headers)
        if remaining is None or remaining >= LOW_REMAINING_THRESHOLD:
            return
        reset = headers.get("x-ratelimit-reset", "0")
        reset_at = datetime.fromtimestamp(int(reset) if reset.isdigit() else 0, tz=timezone.utc)
        logger.warning(
            f"Low API rate limit: {remaining} requests remaining. "
            f"Reset at {reset_at.isoformat()}"
        )
