"""Pure helpers interpreting GitHub rate-limit headers."""

import time
from collections.abc import Mapping

DEFAULT_RATE_LIMIT_WAIT = 60.0
MIN_RESET_WAIT = 1.0
LOW_REMAINING_THRESHOLD = 100

_RATE_LIMIT_STATUSES = frozenset({403, 429})


def _parse_int(value: str | None) -> int | None:
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None


def is_rate_limited(status_code: int, headers: Mapping[str, str]) -> bool:
    """A 429, or a 403 carrying rate-limit headers; plain 403s are permission errors."""
    if status_code not in _RATE_LIMIT_STATUSES:
        return False
    if status_code == 429 or "retry-after" in headers:
        return True
    return _parse_int(headers.get("x-ratelimit-remaining")) == 0


def rate_limit_wait_seconds(headers: Mapping[str, str], now: float | None = None) -> float:
    retry_after = _parse_int(headers.get("retry-after"))
    if retry_after is not None:
        return float(retry_after)

    reset = _parse_int(headers.get("x-ratelimit-reset"))
    if reset is not None:
        current = time.time() if now is None else now
        return max(reset - current, MIN_RESET_WAIT)

    return DEFAULT_RATE_LIMIT_WAIT


def remaining_requests(headers: Mapping[str, str]) -> int | None:
    return _parse_int(headers.get("x-ratelimit-remaining"))
