from merge_marker_guard.infrastructure.common.retry.retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
