import base64
import binascii
from typing import Any
from urllib.parse import quote

from merge_marker_guard.core.application.exceptions import ProviderError
from merge_marker_guard.core.application.ports import FileContentPort
from merge_marker_guard.core.domain.conflict import ChangedFile, PullRequestRef
from merge_marker_guard.infrastructure.common.retry import RetryPolicy
from merge_marker_guard.infrastructure.observability import get_logger
from merge_marker_guard.infrastructure.tools.vcs.github.github_http_client import GitHubHttpClient

logger = get_logger(__name__)


class GitHubContentClient(FileContentPort):
    """Fetches file text at the pull request head through the contents API.

    Files above 1 MB come back without inline content; those are downloaded
    from ``download_url`` instead. Every failure degrades to ``None``.
    """

    def __init__(self, client: GitHubHttpClient, retry_policy: RetryPolicy | None = None):
        self.client = client
        self.retry_policy = retry_policy or RetryPolicy()

    def get_file_content(self, pull_request: PullRequestRef, file: ChangedFile) -> str | None:
        path = f"repos/{pull_request.owner}/{pull_request.repo}/contents/{quote(file.name)}"
        try:
            response = self.retry_policy.run(
                lambda: self.client.get(path, params={"ref": pull_request.head_sha})
            )
            return self._extract_text(response.json(), file)
        except (ProviderError, ValueError) as exc:
            logger.warning(f"Could not check file {file.name}: {exc}", file=file.name)
            return None

    def _extract_text(self, data: Any, file: ChangedFile) -> str | None:
        if not isinstance(data, dict) or data.get("type", "file") != "file":
            logger.warning(f"{file.name} is not a regular file at the head commit", file=file.name)
            return None

        content = data.get("content")
        if data.get("encoding") == "base64" and content:
            return self._decode_base64(content, file)

        download_url = data.get("download_url")
        if download_url:
            response = self.retry_policy.run(lambda: self.client.download(download_url))
            return response.content.decode("utf-8", errors="replace")

        if data.get("size") == 0:
            return ""
        return None

    @staticmethod
    def _decode_base64(content: str, file: ChangedFile) -> str | None:
        try:
            raw = base64.b64decode(content)
        except (binascii.Error, ValueError) as exc:
            logger.warning(f"Could not decode content of {file.name}: {exc}", file=file.name)
            return None
        return raw.decode("utf-8", errors="replace")
