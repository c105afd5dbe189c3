"""Client module for Poof API."""

from .api import Poof
from .models import (
    ClientConfig,
    RemoveBackgroundOptions,
    ProcessingMetadata,
    RemoveBackgroundResult,
    AccountInfo,
    ApiErrorResponse,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
)
from .errors import (
    PoofError,
    AuthenticationError,
    PermissionError,
    PaymentRequiredError,
    RateLimitError,
    ValidationError,
    ServerError,
    RequestTimeoutError,
    UnsupportedInputError,
    FilesystemUnavailableError,
    classify,
)

__all__ = [
    "Poof",
    "ClientConfig",
    "RemoveBackgroundOptions",
    "ProcessingMetadata",
    "RemoveBackgroundResult",
    "AccountInfo",
    "ApiErrorResponse",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "PoofError",
    "AuthenticationError",
    "PermissionError",
    "PaymentRequiredError",
    "RateLimitError",
    "ValidationError",
    "ServerError",
    "RequestTimeoutError",
    "UnsupportedInputError",
    "FilesystemUnavailableError",
    "classify",
]
