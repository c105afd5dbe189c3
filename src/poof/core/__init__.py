"""Core module for Poof SDK."""

from .types import (
    ImageFormat,
    Channels,
    ImageSize,
    ErrorCode,
)

__all__ = [
    "ImageFormat",
    "Channels",
    "ImageSize",
    "ErrorCode",
]
