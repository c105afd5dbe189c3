"""Live integration tests for the Poof SDK.

These tests make actual API calls and consume credits.

Setup Requirements:
Configure your .env file with:
   - POOF_API_KEY=your_api_key
   - POOF_BASE_URL=https://api.poof.bg/v1 (optional)
   - TEST_IMAGE_PATH=test_assets/portrait.jpg
"""

import pytest
from poof import Poof, AccountInfo, AuthenticationError
from .conftest import get_test_api_key, get_test_base_url, get_test_image_path

pytestmark = pytest.mark.integration


@pytest.fixture
def api_key():
    """Get API key from environment."""
    key = get_test_api_key()
    if not key:
        pytest.skip("Set POOF_API_KEY environment variable to run integration tests")
    return key


@pytest.fixture
def client(api_key):
    """Create API client."""
    return Poof(api_key, base_url=get_test_base_url())


def test_me(client):
    """Account info round trip."""
    account = client.me()

    assert isinstance(account, AccountInfo)
    assert account.organization_id
    assert account.max_credits >= account.used_credits


def test_invalid_key(api_key):
    """A bad key is reported as an authentication error."""
    client = Poof("invalid-" + api_key, base_url=get_test_base_url())

    with pytest.raises(AuthenticationError) as exc_info:
        client.me()

    assert exc_info.value.status == 401


def test_remove_background(client, temp_dir):
    """Process a real image and save it."""
    image_path = get_test_image_path()
    if not image_path:
        pytest.skip("Set TEST_IMAGE_PATH to run background removal test")

    result = client.remove_background(
        image_path, {"format": "png", "size": "preview"}
    )

    assert result.data
    assert result.metadata.request_id
    assert result.metadata.width > 0
    assert result.save(f"{temp_dir}/result.png").exists()
