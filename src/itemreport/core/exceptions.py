"""
Custom exceptions for itemreport.
"""


class ItemReportError(Exception):
    """Base exception for all itemreport errors."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class UnsupportedFormatError(ItemReportError, ValueError):
    """Raised when a report is requested in a format with no formatter."""

    def __init__(self, report_type: str, available: list[str] | None = None):
        details = None
        if available:
            details = f"Available formats: {', '.join(available)}"
        super().__init__(f"Unsupported format: {report_type}", details=details)
        self.report_type = report_type
        self.available = list(available or [])


class ValidationError(ItemReportError):
    """Raised when an externally supplied record is malformed."""

    def __init__(self, field: str, value: str, reason: str):
        super().__init__(
            f"Validation failed for {field}",
            details=f"Value '{value}' is invalid: {reason}",
        )
        self.field = field
        self.value = value
        self.reason = reason


class InputFileError(ItemReportError):
    """Raised when an items file cannot be read or decoded."""

    def __init__(self, file_path: str, details: str | None = None):
        super().__init__(f"Failed to read items file: {file_path}", details=details)
        self.file_path = file_path
