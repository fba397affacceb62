"""Custom exception classes for the photo gallery client."""

from typing import Any

from gallery.utils.constants import (
    ERROR_CODE_FETCH_FAILED,
    ERROR_CODE_VALIDATION_FAILED,
)


class GalleryError(Exception):
    """
    Base exception for all gallery client errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    The message is what the gallery shows to the user, so it must be
    readable as-is. Optional context can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(GalleryError):
    """Raised when the add-photo form is missing a required field."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FetchError(GalleryError):
    """Raised when a request to the photo backend fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FETCH_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )

    @property
    def status_code(self) -> int | None:
        """HTTP status of the failed response, if one was received."""
        status = self.details.get("status_code")
        return int(status) if status is not None else None
