"""
NetPlus Error Taxonomy
Tool failures travel as values; only the aggregator boundary raises.
"""
from datetime import datetime, timezone
from enum import Enum


class ToolFailure(str, Enum):
    """Why an external command produced no usable output."""
    NOT_FOUND = "not_found"          # missing or not executable
    TIMEOUT = "timeout"
    NON_ZERO_EXIT = "non_zero_exit"


class PipelineFailure(Exception):
    """An unexpected error escaping a probe; replaced by a category default."""

    def __init__(self, probe: str, cause: BaseException):
        super().__init__(f"{probe}: {cause}")
        self.probe = probe
        self.cause = cause


class CollectorError(Exception):
    """Catastrophic failure of a whole collect() call."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> dict:
        return {
            "error": "Failed to fetch network status",
            "details": self.message,
            "timestamp": self.timestamp,
        }
