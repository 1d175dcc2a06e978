"""
Custom exceptions for the donor profile flattener.

Field-level problems (missing or mistyped answers) are resolved with defaults
inside the transformer and never raise. Everything defined here is a
batch-level failure that aborts the run.
"""

from typing import Any, Optional


class DonorProfilesException(Exception):
    """Base exception for all donor profile errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Input Exceptions
# =============================================================================


class InputError(DonorProfilesException):
    """Base exception for reading donor documents."""

    pass


class InputUnavailableError(InputError):
    """Donor profile file is missing or unreadable."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize with path information."""
        message = f"Cannot read donor profiles from '{path}': {reason}"
        super().__init__(message, {"path": path})


class MalformedInputError(InputError):
    """Donor profile file is not a well-formed array of donor documents."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize with path information."""
        message = f"Malformed donor profiles in '{path}': {reason}"
        super().__init__(message, {"path": path})


# =============================================================================
# Transform Exceptions
# =============================================================================


class TransformError(DonorProfilesException):
    """Base exception for record transformation errors."""

    pass


class MissingPhotoError(TransformError):
    """Donor has no photos but a user image is required."""

    def __init__(self, user_id: str) -> None:
        """Initialize with the offending user ID."""
        message = f"Donor '{user_id}' has no photos to derive a user image from"
        super().__init__(message, {"user_id": user_id})


# =============================================================================
# Output Exceptions
# =============================================================================


class OutputError(DonorProfilesException):
    """Base exception for writing output records."""

    pass


class OutputUnwritableError(OutputError):
    """Output file could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize with path information."""
        message = f"Cannot write output records to '{path}': {reason}"
        super().__init__(message, {"path": path})
