import pytest

from merge_marker_guard.infrastructure.tools.vcs.github.github_rate_limit import (
    DEFAULT_RATE_LIMIT_WAIT,
    is_rate_limited,
    rate_limit_wait_seconds,
    remaining_requests,
)


@pytest.mark.parametrize(
    ("status", "headers", "expected"),
    [
        (429, {}, True),
        (403, {"retry-after": "30"}, True),
        (403, {"x-ratelimit-remaining": "0"}, True),
        (403, {"x-ratelimit-remaining": "12"}, False),
        (403, {}, False),
        (500, {"retry-after": "30"}, False),
        (404, {}, False),
    ],
)
def test_is_rate_limited(status, headers, expected):
    assert is_rate_limited(status, headers) is expected


def test_retry_after_wins():
    headers = {"retry-after": "30", "x-ratelimit-reset": "2000"}

    assert rate_limit_wait_seconds(headers, now=1000.0) == 30.0


def test_reset_time_is_relative_to_now():
    assert rate_limit_wait_seconds({"x-ratelimit-reset": "1045"}, now=1000.0) == 45.0


def test_reset_in_the_past_waits_at_least_one_second():
    assert rate_limit_wait_seconds({"x-ratelimit-reset": "900"}, now=1000.0) == 1.0


def test_default_wait_without_hints():
    assert rate_limit_wait_seconds({}, now=1000.0) == DEFAULT_RATE_LIMIT_WAIT


def test_remaining_requests():
    assert remaining_requests({"x-ratelimit-remaining": "99"}) == 99
    assert remaining_requests({"x-ratelimit-remaining": "n/a"}) is None
    assert remaining_requests({}) is None
