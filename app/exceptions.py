from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service and repository layers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    error_code = "SERVICE_ERROR"
    default_message = "Service error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code or self.error_code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found."""

    http_status = 404
    error_code = "NOT_FOUND"
    default_message = "Not found"


class ConflictError(ServiceError):
    """Raised when a resource conflict occurs (e.g., duplicate entry)."""

    http_status = 409
    error_code = "CONFLICT"
    default_message = "Conflict"


class StorageUnavailableError(ServiceError):
    """Raised when the persistence layer cannot be reached.

    Never retried internally; the request fails once and the handler
    reports a 503 to the client.
    """

    http_status = 503
    error_code = "STORAGE_UNAVAILABLE"
    default_message = "Storage unavailable"
