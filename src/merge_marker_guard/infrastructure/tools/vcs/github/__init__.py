from merge_marker_guard.infrastructure.tools.vcs.github.github_content_client import (
    GitHubContentClient,
)
from merge_marker_guard.infrastructure.tools.vcs.github.github_http_client import GitHubHttpClient
from merge_marker_guard.infrastructure.tools.vcs.github.github_pull_request_client import (
    GitHubPullRequestClient,
)

__all__ = ["GitHubContentClient", "GitHubHttpClient", "GitHubPullRequestClient"]
