# /app/core/exceptions.py

from typing import Any, Dict, Optional


class SchoolRecordsError(Exception):
    """
    Base class for every custom error raised by the application.
    Carries a machine-readable `code` alongside the human message so the
    exception handler in `main.py` can build a consistent response body.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)


class StorageCorruptedError(SchoolRecordsError, ValueError):
    """Raised when a persisted collection cannot be deserialized."""
    def __init__(self, key: str, reason: str):
        super().__init__(
            message=f"Stored collection '{key}' is not valid JSON: {reason}",
            code="STORAGE_CORRUPTED",
            details={"key": key},
        )
