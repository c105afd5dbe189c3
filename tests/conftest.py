"""Shared test fixtures and configuration."""

import os
import tempfile
import pytest
from dotenv import load_dotenv

# Auto-load .env file for tests
load_dotenv()

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 24
WEBP_BYTES = b"RIFF\x24\x00\x00\x00WEBPVP8 " + b"\x00" * 16
GIF_BYTES = b"GIF89a" + b"\x00" * 24


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture
def sample_png_path(temp_dir):
    """Write a file with a PNG signature."""
    path = os.path.join(temp_dir, "sample.png")
    with open(path, "wb") as f:
        f.write(PNG_BYTES)
    return path


@pytest.fixture
def jpeg_named_png_path(temp_dir):
    """Write JPEG bytes under a .png name."""
    path = os.path.join(temp_dir, "mislabeled.png")
    with open(path, "wb") as f:
        f.write(JPEG_BYTES)
    return path


def get_test_api_key():
    """Get API key for live tests."""
    return os.getenv("POOF_API_KEY")


def get_test_base_url():
    """Get base URL for live tests."""
    return os.getenv("POOF_BASE_URL", "https://api.poof.bg/v1")


def get_test_image_path():
    """Get a local image for live tests."""
    return os.getenv("TEST_IMAGE_PATH")
