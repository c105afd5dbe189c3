"""Image input normalization.

Turns any supported image input into a :class:`NormalizedImage` holding the
bytes, content type and upload filename sent to the API.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional, Union, Any, BinaryIO
from ..client.errors import UnsupportedInputError, FilesystemUnavailableError

OCTET_STREAM = "application/octet-stream"

MIME_FROM_EXTENSION = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
    "gif": "image/gif",
}

EXTENSION_FROM_MIME = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
}


@dataclass(frozen=True)
class ImageFile:
    """In-memory image with a known content type."""

    data: bytes
    content_type: str
    filename: Optional[str] = None


@dataclass(frozen=True)
class NormalizedImage:
    """Canonical upload form of an image input."""

    data: bytes
    content_type: str
    filename: str


ImageInput = Union[ImageFile, bytes, bytearray, memoryview, str, os.PathLike, BinaryIO]


def detect_mime_type(data: bytes) -> str:
    """Detect an image MIME type from the first 12 bytes."""
    head = bytes(data[:12])
    if head[:4] == b"\x89PNG":
        return "image/png"
    if head[:3] == b"\xff\xd8\xff":
        return "image/jpeg"
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "image/webp"
    if head[:3] == b"GIF":
        return "image/gif"
    return OCTET_STREAM


def extension_for(content_type: str) -> str:
    """File extension used for generated filenames."""
    return EXTENSION_FROM_MIME.get(content_type, "bin")


def default_filename(content_type: str) -> str:
    return f"image.{extension_for(content_type)}"


def _basename(path: str) -> str:
    # Split on both separators so Windows paths behave the same everywhere
    return path.replace("\\", "/").split("/")[-1]


def _mime_from_path(path: str, data: bytes) -> str:
    ext = os.path.splitext(_basename(path))[1].lower().lstrip(".")
    return MIME_FROM_EXTENSION.get(ext) or detect_mime_type(data)


class InputNormalizer:
    """Converts image inputs into :class:`NormalizedImage`."""

    def __init__(self, filesystem: bool = True, logger: Optional[logging.Logger] = None):
        """
        Initialize the normalizer.

        Args:
            filesystem: Whether file paths may be read from disk
            logger: Logger instance for debugging
        """
        self.filesystem = filesystem
        self.logger = logger or logging.getLogger(__name__)

    def normalize(self, image: ImageInput) -> NormalizedImage:
        """
        Normalize an image input.

        Args:
            image: ImageFile, bytes, bytearray, memoryview, file path or
                binary file object

        Returns:
            Bytes, content type and filename for the upload

        Raises:
            UnsupportedInputError: If the input type is not supported
            FilesystemUnavailableError: If a path is given without filesystem access
        """
        if isinstance(image, ImageFile):
            normalized = NormalizedImage(
                data=bytes(image.data),
                content_type=image.content_type,
                filename=image.filename or default_filename(image.content_type),
            )
        elif isinstance(image, (bytes, bytearray, memoryview)):
            data = bytes(image)
            content_type = detect_mime_type(data)
            normalized = NormalizedImage(data, content_type, default_filename(content_type))
        elif isinstance(image, (str, os.PathLike)):
            normalized = self._from_path(os.fspath(image))
        elif hasattr(image, "read"):
            normalized = self._from_file_object(image)
        else:
            raise UnsupportedInputError(
                f"Unsupported input type: {type(image).__name__}"
            )

        self.logger.debug(
            f"Normalized {type(image).__name__} input to {normalized.filename} "
            f"({normalized.content_type}, {len(normalized.data)} bytes)"
        )
        return normalized

    def _from_path(self, path: str) -> NormalizedImage:
        if not self.filesystem:
            raise FilesystemUnavailableError(
                "File paths are not supported without filesystem access. "
                "Pass bytes or an ImageFile instead."
            )
        with open(path, "rb") as f:
            data = f.read()
        content_type = _mime_from_path(path, data)
        filename = _basename(path) or default_filename(content_type)
        return NormalizedImage(data, content_type, filename)

    def _from_file_object(self, fileobj: Any) -> NormalizedImage:
        data = fileobj.read()
        if isinstance(data, str):
            raise UnsupportedInputError("File objects must be opened in binary mode")
        data = bytes(data)
        name = getattr(fileobj, "name", None)
        if isinstance(name, str) and _basename(name):
            content_type = _mime_from_path(name, data)
            return NormalizedImage(data, content_type, _basename(name))
        content_type = detect_mime_type(data)
        return NormalizedImage(data, content_type, default_filename(content_type))


_default_normalizer = InputNormalizer()


def normalize(image: ImageInput) -> NormalizedImage:
    """Normalize an image input with filesystem access enabled."""
    return _default_normalizer.normalize(image)
