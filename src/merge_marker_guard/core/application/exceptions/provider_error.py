from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=False, eq=False)
class ProviderError(Exception):
    """Failure talking to the source-control provider."""

    provider: str
    message: str
    retryable: bool = False
    status_code: int | None = None
    retry_after: float | None = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"
