"""Error Hierarchy — typed, categorized exceptions for dataset failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - message is the human-readable text sent to the caller; detail is for logs only
    - Data file errors are all 500-level: the caller cannot fix them

Design Decisions:
    - Single hierarchy with ExhibitsApiError base: one FastAPI handler catches all
    - Plain-text responses: to_text() is the whole response body, no JSON envelope
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DATA_FILE = "data_file"
    INTERNAL = "internal"


class ExhibitsApiError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.detail = detail

    def to_text(self) -> str:
        """Plain-text response body."""
        return self.message


# ─── Data File Errors (500-level) ───────────────────────────────

class DataFileNotFoundError(ExhibitsApiError):
    """Data file missing from every searched location."""
    def __init__(self, filename: str, searched: list[str] | None = None):
        self.filename = filename
        self.searched = searched or []
        super().__init__(
            f"Error finding {filename}: file does not exist",
            "DATA_FILE_NOT_FOUND", ErrorCategory.DATA_FILE,
            ErrorSeverity.CRITICAL, 500,
            detail=f"searched: {', '.join(self.searched)}" if self.searched else None,
        )


class DataFileReadError(ExhibitsApiError):
    """Data file exists but could not be read."""
    def __init__(self, filename: str, path: str, reason: str):
        self.filename = filename
        self.path = path
        super().__init__(
            f"Error reading {filename}: {reason}",
            "DATA_FILE_READ_ERROR", ErrorCategory.DATA_FILE,
            ErrorSeverity.CRITICAL, 500,
            detail=f"path: {path}",
        )


class DataFileDecodeError(ExhibitsApiError):
    """Data file is not valid JSON or does not match the record shape."""
    def __init__(self, filename: str, reason: str):
        self.filename = filename
        super().__init__(
            f"Error parsing {filename}",
            "DATA_FILE_DECODE_ERROR", ErrorCategory.DATA_FILE,
            ErrorSeverity.ERROR, 500,
            detail=reason,
        )
