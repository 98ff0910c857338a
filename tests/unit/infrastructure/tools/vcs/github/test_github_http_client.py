import httpx
import pytest
from pydantic import SecretStr

from merge_marker_guard.core.application.exceptions import ProviderError
from merge_marker_guard.infrastructure.tools.vcs.github import GitHubHttpClient


def _client(settings, handler) -> GitHubHttpClient:
    return GitHubHttpClient(settings, transport=httpx.MockTransport(handler))


def test_sends_auth_headers_and_params(settings):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["accept"] = request.headers["Accept"]
        return httpx.Response(200, json=[])

    response = _client(settings, handler).get("/repos/octo/widgets/pulls/1/files", {"page": 2})

    assert response.json() == []
    assert seen["url"] == "https://api.github.example.com/repos/octo/widgets/pulls/1/files?page=2"
    assert seen["auth"] == "Bearer mock_gh_token"
    assert seen["accept"] == "application/vnd.github+json"


def test_rate_limit_response_is_retryable_with_hint(settings):
    def handler(request):
        return httpx.Response(429, headers={"retry-after": "12"}, text="slow down")

    with pytest.raises(ProviderError) as exc:
        _client(settings, handler).get("repos/octo/widgets")

    assert exc.value.retryable is True
    assert exc.value.status_code == 429
    assert exc.value.retry_after == 12.0


def test_permission_error_is_not_retryable(settings):
    def handler(request):
        return httpx.Response(403, headers={"x-ratelimit-remaining": "4000"}, text="forbidden")

    with pytest.raises(ProviderError) as exc:
        _client(settings, handler).get("repos/octo/widgets")

    assert exc.value.retryable is False
    assert exc.value.status_code == 403


def test_server_error_is_retryable(settings):
    with pytest.raises(ProviderError) as exc:
        _client(settings, lambda request: httpx.Response(502)).get("repos/octo/widgets")

    assert exc.value.retryable is True
    assert exc.value.retry_after is None


def test_transport_error_is_wrapped(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProviderError) as exc:
        _client(settings, handler).get("repos/octo/widgets")

    assert exc.value.retryable is True
    assert exc.value.status_code is None


def test_missing_token_is_rejected(settings):
    no_token = settings.model_copy(update={"github_token": SecretStr("")})

    with pytest.raises(ValueError):
        GitHubHttpClient(no_token)
