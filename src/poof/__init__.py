"""Poof Python SDK - Remove image backgrounds with the Poof API."""

from .__version__ import __version__
from .client import (
    Poof,
    RemoveBackgroundOptions,
    RemoveBackgroundResult,
    ProcessingMetadata,
    AccountInfo,
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
)
from .media import (
    ImageFile,
    InputNormalizer,
    normalize,
)
from .core import (
    ImageFormat,
    Channels,
    ImageSize,
    ErrorCode,
)


__all__ = [
    "__version__",
    "Poof",
    "RemoveBackgroundOptions",
    "RemoveBackgroundResult",
    "ProcessingMetadata",
    "AccountInfo",
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
    "ImageFile",
    "InputNormalizer",
    "normalize",
    "ImageFormat",
    "Channels",
    "ImageSize",
    "ErrorCode",
]
