from merge_marker_guard.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from merge_marker_guard.infrastructure.observability.redaction_service import redact_text

__all__ = ["configure_logging", "get_logger", "redact_text"]
