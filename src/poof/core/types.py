"""Core types and enums for the Poof SDK."""

from enum import Enum


class ImageFormat(str, Enum):
    """Output image format."""

    PNG = "png"
    JPG = "jpg"
    WEBP = "webp"


class Channels(str, Enum):
    """Output color channels."""

    RGBA = "rgba"  # Transparent background
    RGB = "rgb"  # Opaque, filled with bg_color


class ImageSize(str, Enum):
    """Output image size preset."""

    FULL = "full"
    PREVIEW = "preview"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ErrorCode(str, Enum):
    """Error codes returned by the API."""

    AUTHENTICATION_ERROR = "authentication_error"
    PERMISSION_DENIED = "permission_denied"
    PAYMENT_REQUIRED = "payment_required"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    VALIDATION_ERROR = "validation_error"
    MISSING_IMAGE = "missing_image"
    IMAGE_TOO_LARGE = "image_too_large"
    UPSTREAM_ERROR = "upstream_error"
    INTERNAL_SERVER_ERROR = "internal_server_error"
