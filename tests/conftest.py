from pathlib import Path

import pytest

from merge_marker_guard.core.domain.conflict import ChangedFile, FileStatus, PullRequestRef
from merge_marker_guard.infrastructure.configuration import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        github_token="mock_gh_token",
        github_api_url="https://api.github.example.com",
        github_repository="octo/widgets",
        github_event_path=tmp_path / "event.json",
        github_output=tmp_path / "github_output",
        pull_number=None,
        head_sha=None,
        exclude_patterns="",
        max_retries=3,
        log_format="console",
    )


@pytest.fixture
def pull_request() -> PullRequestRef:
    return PullRequestRef(owner="octo", repo="widgets", number=42, head_sha="abc123")


@pytest.fixture
def make_file():
    def _make(name: str, status: str = "modified", patch: str | None = None) -> ChangedFile:
        return ChangedFile(name=name, status=FileStatus.from_string(status), patch=patch)

    return _make
