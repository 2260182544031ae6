"""Error types and status mapping."""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    BAD_REQUEST = "BadRequest"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    RATE_LIMITED = "RateLimited"
    SERVER_ERROR = "ServerError"
    UNKNOWN = "Unknown"


_STATUS_CATEGORIES: dict[int, ErrorCategory] = {
    400: ErrorCategory.BAD_REQUEST,
    401: ErrorCategory.UNAUTHORIZED,
    403: ErrorCategory.FORBIDDEN,
    404: ErrorCategory.NOT_FOUND,
    405: ErrorCategory.METHOD_NOT_ALLOWED,
    429: ErrorCategory.RATE_LIMITED,
    500: ErrorCategory.SERVER_ERROR,
}

_CATEGORY_LABELS: dict[ErrorCategory, str] = {
    ErrorCategory.BAD_REQUEST: "Bad Request",
    ErrorCategory.UNAUTHORIZED: "Unauthorized",
    ErrorCategory.FORBIDDEN: "Forbidden",
    ErrorCategory.NOT_FOUND: "Not Found",
    ErrorCategory.METHOD_NOT_ALLOWED: "Method Not Allowed",
    ErrorCategory.RATE_LIMITED: "Too Many Requests",
    ErrorCategory.SERVER_ERROR: "Internal Server Error",
    ErrorCategory.UNKNOWN: "Unknown Error",
}

DEFAULT_HINTS: dict[ErrorCategory, str] = {
    ErrorCategory.BAD_REQUEST: "The request was malformed; check the parameters and body",
    ErrorCategory.UNAUTHORIZED: "Ensure your credentials are correct",
    ErrorCategory.FORBIDDEN: "You do not have permission to access this resource",
    ErrorCategory.NOT_FOUND: "The requested resource could not be found",
    ErrorCategory.METHOD_NOT_ALLOWED: "The HTTP method is not supported for this resource",
    ErrorCategory.RATE_LIMITED: "Rate limit exceeded; wait before sending more requests",
    ErrorCategory.SERVER_ERROR: "The server encountered an error; try again later",
    ErrorCategory.UNKNOWN: "An unexpected error occurred",
}


def classify_http_status(status: int | None) -> ErrorCategory:
    """Map an HTTP status code to its error category.

    Anything outside the fixed table, including a missing status, is UNKNOWN.
    """

    if status is None:
        return ErrorCategory.UNKNOWN
    return _STATUS_CATEGORIES.get(status, ErrorCategory.UNKNOWN)


def category_label(category: ErrorCategory) -> str:
    return _CATEGORY_LABELS[category]


def format_error_message(
    category: ErrorCategory,
    *,
    http_status: int | None = None,
    status_description: str | None = None,
    hint: str | None = None,
) -> str:
    prefix = category_label(category)
    if http_status is not None:
        prefix = f"{http_status} {prefix}"
    message = f"{prefix}: {hint or DEFAULT_HINTS[category]}"
    if status_description:
        message = f"{message} ({status_description})"
    return message


class ApiInvokerError(Exception):
    """Base exception for this package."""

    default_category = ErrorCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        http_status: int | None = None,
        status_description: str | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.http_status = http_status
        self.status_description = status_description
        self.cause = cause


class InvalidArgumentError(ApiInvokerError):
    """Request rejected before any network activity."""


class InvokerClosedError(ApiInvokerError):
    """Raised when a client is used after close."""


class TransportFailureError(ApiInvokerError):
    """No HTTP response was received (DNS, TLS, connect, timeout)."""


class HttpStatusError(ApiInvokerError):
    """HTTP response with a 4xx/5xx status."""


class MalformedResponseError(ApiInvokerError):
    """Response body is not valid JSON or lacks expected envelope fields."""


class EnvelopeStatusError(ApiInvokerError):
    """Envelope-level status other than 200."""

    def __init__(
        self,
        message: str,
        *,
        status: int | None,
        response: object = None,
        http_status: int | None = None,
        status_description: str | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.UNKNOWN,
            http_status=http_status,
            status_description=status_description,
            cause="envelope_status",
        )
        self.status = status
        self.response = response


__all__ = [
    "ErrorCategory",
    "DEFAULT_HINTS",
    "classify_http_status",
    "category_label",
    "format_error_message",
    "ApiInvokerError",
    "InvalidArgumentError",
    "InvokerClosedError",
    "TransportFailureError",
    "HttpStatusError",
    "MalformedResponseError",
    "EnvelopeStatusError",
]
