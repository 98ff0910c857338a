from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from merge_marker_guard.core.application.exceptions import ProviderError
from merge_marker_guard.infrastructure.observability import get_logger

_T = TypeVar("_T")

logger = get_logger(__name__)

_backoff = wait_exponential_jitter(initial=0.25, max=5.0)


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, ProviderError) and exc.retryable


def _wait(retry_state: RetryCallState) -> float:
    """Honour the provider's rate-limit hint, otherwise back off exponentially."""
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    if isinstance(exc, ProviderError) and exc.retry_after is not None:
        return exc.retry_after
    return _backoff(retry_state)


def _log_before_sleep(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    wait_seconds = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.warning(
        f"Request failed, retrying in {wait_seconds:.2f} seconds...",
        attempt=retry_state.attempt_number,
        error=str(exc),
    )


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 4  # 1 attempt + 3 retries
    sleep: Callable[[float], None] = field(default=time.sleep, compare=False)

    def run(self, fn: Callable[[], _T]) -> _T:
        return self._retrying()(fn)

    def _retrying(self) -> Retrying:
        return Retrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=_wait,
            sleep=self.sleep,
            before_sleep=_log_before_sleep,
            reraise=True,
        )
