"""Pydantic models for Poof API client."""

from pathlib import Path
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, Dict, Union
from ..core.types import ImageFormat, Channels, ImageSize

DEFAULT_BASE_URL = "https://api.poof.bg/v1"
DEFAULT_TIMEOUT = 60.0


class ClientConfig(BaseModel):
    """Immutable client configuration."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("timeout", mode="before")
    @classmethod
    def default_timeout(cls, v):
        """None or 0 selects the default timeout."""
        return v or DEFAULT_TIMEOUT

    @field_validator("api_key")
    @classmethod
    def require_api_key(cls, v):
        """Reject empty API keys before any request is made."""
        if not v or not v.strip():
            raise ValueError("API key is required")
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        """Drop a single trailing slash; empty means the default endpoint."""
        if v.endswith("/"):
            v = v[:-1]
        return v or DEFAULT_BASE_URL

    @field_validator("timeout")
    @classmethod
    def positive_timeout(cls, v):
        """Negative timeouts are rejected."""
        if v < 0:
            raise ValueError("timeout must not be negative")
        return v


class RemoveBackgroundOptions(BaseModel):
    """Options for background removal.

    Every field is optional. Fields left as ``None`` are not sent, so the
    server-side defaults apply (png, rgba, full size, no crop).
    """

    model_config = ConfigDict(extra="forbid")

    format: Optional[ImageFormat] = None
    channels: Optional[Channels] = None
    # Hex, rgb() or color name. Only applies when channels is 'rgb'
    bg_color: Optional[str] = None
    size: Optional[ImageSize] = None
    crop: Optional[bool] = None

    def to_form_fields(self) -> Dict[str, str]:
        """Serialize the present options as multipart form fields."""
        fields: Dict[str, str] = {}
        for name, value in self.model_dump(exclude_none=True, mode="json").items():
            if isinstance(value, bool):
                fields[name] = "true" if value else "false"
            else:
                fields[name] = str(value)
        return fields


class ProcessingMetadata(BaseModel):
    """Metadata returned with processed images."""

    request_id: str = ""
    processing_time_ms: int = 0
    width: int = 0
    height: int = 0
    content_type: str = "image/png"


class RemoveBackgroundResult(BaseModel):
    """Processed image data and its metadata."""

    data: bytes
    metadata: ProcessingMetadata

    def save(self, path: Union[str, Path]) -> Path:
        """
        Write the processed image to disk.

        Args:
            path: Destination file path

        Returns:
            The path written to
        """
        path = Path(path)
        path.write_bytes(self.data)
        return path


class AccountInfo(BaseModel):
    """Account information response model."""

    organization_id: str
    plan: str
    max_credits: int
    used_credits: int
    auto_recharge_threshold: Optional[int] = None

    @property
    def remaining_credits(self) -> int:
        """Credits left in the current billing cycle."""
        return self.max_credits - self.used_credits


class ApiErrorResponse(BaseModel):
    """Error body returned by the API on non-success responses."""

    # Plain str so codes added server-side still parse
    code: str
    message: str
    details: Optional[str] = None
    request_id: Optional[str] = None
