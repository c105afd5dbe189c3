"""Media module for image input handling."""

from .inputs import (
    ImageFile,
    ImageInput,
    NormalizedImage,
    InputNormalizer,
    detect_mime_type,
    extension_for,
    normalize,
)

__all__ = [
    "ImageFile",
    "ImageInput",
    "NormalizedImage",
    "InputNormalizer",
    "detect_mime_type",
    "extension_for",
    "normalize",
]
