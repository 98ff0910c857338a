from typing import Any

import httpx

from merge_marker_guard.core.application.exceptions import ProviderError
from merge_marker_guard.infrastructure.configuration import Settings
from merge_marker_guard.infrastructure.observability import get_logger, redact_text
from merge_marker_guard.infrastructure.tools.vcs.github.github_rate_limit import (
    is_rate_limited,
    rate_limit_wait_seconds,
)

logger = get_logger(__name__)

PROVIDER = "github"
API_VERSION = "2022-11-28"


class GitHubHttpClient:
    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self.base_url = settings.github_api_url.rstrip("/")
        self._transport = transport
        self._validate_config()

    def _validate_config(self):
        self.settings.validate_github_credentials()

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.settings.github_token.get_secret_value()}",
            "X-GitHub-Api-Version": API_VERSION,
        }

    def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """GET an API path, raising ProviderError for transport failures and non-2xx replies."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        return self._send(url, params)

    def download(self, url: str) -> httpx.Response:
        """GET an absolute URL (raw file downloads) with the same auth and error mapping."""
        return self._send(url, None)

    def _send(self, url: str, params: dict[str, Any] | None) -> httpx.Response:
        try:
            with httpx.Client(transport=self._transport, follow_redirects=True) as client:
                response = client.get(
                    url,
                    headers=self._get_headers(),
                    params=params,
                    timeout=self.settings.request_timeout,
                )
        except httpx.HTTPError as exc:
            raise ProviderError(
                provider=PROVIDER,
                message=redact_text(f"Request to {url} failed: {exc}"),
                retryable=True,
            ) from exc

        if response.is_success:
            return response
        raise self._to_provider_error(url, response)

    @staticmethod
    def _to_provider_error(url: str, response: httpx.Response) -> ProviderError:
        status = response.status_code
        if is_rate_limited(status, response.headers):
            return ProviderError(
                provider=PROVIDER,
                message=f"Rate limited on {url}",
                retryable=True,
                status_code=status,
                retry_after=rate_limit_wait_seconds(response.headers),
            )
        return ProviderError(
            provider=PROVIDER,
            message=redact_text(f"Request to {url} failed: {response.text[:200]}"),
            retryable=status >= 500,
            status_code=status,
        )
