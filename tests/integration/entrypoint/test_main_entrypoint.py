"""End-to-end runs of the entry point against a mocked GitHub API."""

import base64
import json

import httpx
import pytest

from merge_marker_guard import main as main_module
from merge_marker_guard.infrastructure.tools.output import ActionsOutputAdapter
from merge_marker_guard.infrastructure.tools.vcs.github import GitHubHttpClient


def _install_api(monkeypatch, routes):
    def handler(request: httpx.Request) -> httpx.Response:
        key = request.url.path
        if key not in routes:
            return httpx.Response(404, json={"message": "Not Found"})
        return httpx.Response(200, json=routes[key])

    transport = httpx.MockTransport(handler)
    monkeypatch.setattr(
        main_module,
        "GitHubHttpClient",
        lambda settings: GitHubHttpClient(settings, transport=transport),
    )


@pytest.fixture
def pr_event(settings):
    settings.github_event_path.write_text(
        json.dumps({"pull_request": {"number": 42, "head": {"sha": "abc123"}}})
    )
    return settings


def _outputs(settings) -> dict[str, str]:
    lines = settings.github_output.read_text().splitlines()
    return dict(line.split("=", 1) for line in lines)


def test_conflicts_fail_the_check(monkeypatch, pr_event):
    _install_api(
        monkeypatch,
        {
            "/repos/octo/widgets/pulls/42/files": [
                {"filename": "a.js", "status": "modified", "patch": "+<<<<<<< HEAD\n+x\n+======="},
                {"filename": "b.js", "status": "modified", "patch": "+ok"},
            ]
        },
    )

    assert main_module.main(pr_event) == 1
    assert _outputs(pr_event) == {"conflicts": "true", "conflicted-files": "a.js"}


def test_clean_pull_request_passes(monkeypatch, pr_event):
    content = base64.b64encode(b"{\n  \"ok\": true\n}\n").decode("ascii")
    _install_api(
        monkeypatch,
        {
            "/repos/octo/widgets/pulls/42/files": [
                {"filename": "a.js", "status": "modified", "patch": "+const a = 1;"},
                {"filename": "big.json", "status": "modified"},
                {"filename": "gone.js", "status": "removed"},
            ],
            "/repos/octo/widgets/contents/big.json": {
                "type": "file",
                "encoding": "base64",
                "content": content,
            },
        },
    )

    assert main_module.main(pr_event) == 0
    assert _outputs(pr_event) == {"conflicts": "false", "conflicted-files": ""}


def test_full_content_markers_are_found_when_patch_is_missing(monkeypatch, pr_event):
    content = base64.b64encode(b"a\n<<<<<<< HEAD\nb\n").decode("ascii")
    _install_api(
        monkeypatch,
        {
            "/repos/octo/widgets/pulls/42/files": [{"filename": "big.txt", "status": "added"}],
            "/repos/octo/widgets/contents/big.txt": {
                "type": "file",
                "encoding": "base64",
                "content": content,
            },
        },
    )

    assert main_module.main(pr_event) == 1
    assert _outputs(pr_event)["conflicted-files"] == "big.txt"


def test_exclude_patterns_are_applied(monkeypatch, pr_event):
    settings = pr_event.model_copy(update={"exclude_patterns": "fixtures/, "})
    _install_api(
        monkeypatch,
        {
            "/repos/octo/widgets/pulls/42/files": [
                {"filename": "tests/fixtures/conflict.txt", "status": "added", "patch": "+======="},
            ]
        },
    )

    assert main_module.main(settings) == 0


def test_non_pull_request_event_fails(monkeypatch, pr_event):
    pr_event.github_event_path.write_text(json.dumps({"ref": "refs/heads/main"}))
    _install_api(monkeypatch, {})

    assert main_module.main(pr_event) == 1
    assert not pr_event.github_output.exists()


def test_missing_token_is_reported_as_failure(monkeypatch):
    for key in ("GITHUB_TOKEN", "INPUT_GITHUB-TOKEN"):
        monkeypatch.delenv(key, raising=False)
    failures = []
    original = ActionsOutputAdapter.report_failure

    def record_failure(self, message):
        failures.append(message)
        original(self, message)

    monkeypatch.setattr(ActionsOutputAdapter, "report_failure", record_failure)

    assert main_module.main() == 1
    assert len(failures) == 1
    assert failures[0].startswith("Invalid configuration")
