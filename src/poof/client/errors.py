"""Exceptions raised by the Poof SDK."""

from typing import Optional, Dict, Any, Type
from ..core.types import ErrorCode
from .models import ApiErrorResponse


class PoofError(Exception):
    """Base exception for all Poof API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status: Optional[int] = None,
        request_id: Optional[str] = None,
        details: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status
        self.request_id = request_id
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Return the error fields as a plain dict."""
        return {
            "type": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "status": self.status,
            "request_id": self.request_id,
            "details": self.details,
        }

    @classmethod
    def from_response(cls, response: ApiErrorResponse, status: int) -> "PoofError":
        """Create the matching error from an API error body."""
        error_class = ERROR_MAP.get(response.code, PoofError)
        return error_class(
            response.message,
            response.code,
            status=status,
            request_id=response.request_id,
            details=response.details,
        )


class AuthenticationError(PoofError):
    """Raised when the API key is invalid or missing."""

    pass


class PermissionError(PoofError):
    """Raised when the account doesn't have permission."""

    pass


class PaymentRequiredError(PoofError):
    """Raised when the account has insufficient credits."""

    pass


class RateLimitError(PoofError):
    """Raised when the rate limit is exceeded."""

    pass


class ValidationError(PoofError):
    """Raised when request parameters are invalid."""

    pass


class ServerError(PoofError):
    """Raised when the API or an upstream service fails."""

    pass


class RequestTimeoutError(PoofError):
    """Raised when no response arrives within the client timeout."""

    def __init__(self, message: str = "Request timeout"):
        super().__init__(message, "timeout", status=408)


class UnsupportedInputError(TypeError):
    """Raised when an image input is not one of the supported types."""

    pass


class FilesystemUnavailableError(RuntimeError):
    """Raised when a file path is given to a normalizer without filesystem access."""

    pass


ERROR_MAP: Dict[str, Type[PoofError]] = {
    ErrorCode.AUTHENTICATION_ERROR.value: AuthenticationError,
    ErrorCode.PERMISSION_DENIED.value: PermissionError,
    ErrorCode.PAYMENT_REQUIRED.value: PaymentRequiredError,
    ErrorCode.RATE_LIMIT_EXCEEDED.value: RateLimitError,
    ErrorCode.VALIDATION_ERROR.value: ValidationError,
    ErrorCode.MISSING_IMAGE.value: ValidationError,
    ErrorCode.IMAGE_TOO_LARGE.value: ValidationError,
    ErrorCode.UPSTREAM_ERROR.value: ServerError,
    ErrorCode.INTERNAL_SERVER_ERROR.value: ServerError,
}


def classify(payload: ApiErrorResponse, status: int) -> PoofError:
    """Map an API error body and HTTP status to a typed error."""
    return PoofError.from_response(payload, status)


def unknown_error(status: int, reason: Optional[str]) -> PoofError:
    """Error for failed responses whose body is not a JSON error payload."""
    return PoofError(f"HTTP {status}: {reason or ''}".rstrip(), "unknown_error", status=status)
