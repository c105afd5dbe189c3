"""Poof API client."""

import time
import logging
import requests
from typing import Optional, Union, Dict, Any, Tuple
from urllib3.exceptions import ReadTimeoutError
from ..__version__ import __version__
from ..media.inputs import InputNormalizer, ImageInput
from .models import (
    ClientConfig,
    RemoveBackgroundOptions,
    RemoveBackgroundResult,
    ProcessingMetadata,
    AccountInfo,
    ApiErrorResponse,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
)
from .errors import RequestTimeoutError, classify, unknown_error

CHUNK_SIZE = 8192


def _int_header(response: requests.Response, name: str) -> int:
    try:
        return int(response.headers.get(name) or 0)
    except ValueError:
        return 0


class Poof:
    """Client for the Poof background removal API.

    Example:
        >>> poof = Poof(api_key="your-api-key")
        >>> result = poof.remove_background("photo.jpg", {"format": "webp"})
        >>> result.save("photo.webp")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
        normalizer: Optional[InputNormalizer] = None,
    ):
        """
        Initialize the API client.

        Args:
            api_key: Your Poof API key
            base_url: Base URL for the API (default: production)
            timeout: Request timeout in seconds (None or 0 means the default)
            session: Optional requests session to use
            logger: Logger instance for debugging
            normalizer: Input normalizer (default: with filesystem access)

        Raises:
            ValueError: If the API key is missing or the timeout is negative
        """
        self.config = ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout)
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)
        self.normalizer = normalizer or InputNormalizer(logger=self.logger)

        # Set up authentication header
        self.session.headers.update(
            {"x-api-key": self.config.api_key, "User-Agent": f"poof-python/{__version__}"}
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout(self) -> float:
        return self.config.timeout

    def _request(
        self, method: str, endpoint: str, **kwargs
    ) -> Tuple[requests.Response, bytes]:
        """
        Make a request to the API, raising a typed error on failure.

        The body is streamed and read inside the timeout window. The
        timeout bounds connecting, each socket read, and the call as a
        whole (checked between body chunks).

        Returns:
            The response and its full body
        """
        url = f"{self.base_url}{endpoint}"

        # Set timeout if not provided
        if "timeout" not in kwargs:
            kwargs["timeout"] = self.timeout
        deadline = time.monotonic() + self.timeout

        self.logger.debug(f"{method} {url}")
        response = None
        try:
            response = self.session.request(method, url, stream=True, **kwargs)
            chunks = []
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise requests.exceptions.Timeout()
            body = b"".join(chunks)
        except requests.exceptions.ConnectionError as e:
            # Body read timeouts surface as ConnectionError(ReadTimeoutError)
            if not isinstance(e, requests.exceptions.Timeout) and not (
                e.args and isinstance(e.args[0], ReadTimeoutError)
            ):
                raise
            raise self._timeout_error(method, url, response)
        except requests.exceptions.Timeout:
            raise self._timeout_error(method, url, response)

        if not 200 <= response.status_code < 300:
            raise self._error_from_response(response, body)

        return response, body

    def _timeout_error(
        self, method: str, url: str, response: Optional[requests.Response]
    ) -> RequestTimeoutError:
        if response is not None:
            response.close()
        self.logger.warning(f"{method} {url} timed out after {self.timeout} seconds")
        return RequestTimeoutError()

    def _error_from_response(self, response: requests.Response, body: bytes):
        try:
            payload = ApiErrorResponse.model_validate_json(body)
        except ValueError:
            # Covers both invalid JSON and JSON that is not an error body
            error = unknown_error(response.status_code, response.reason)
        else:
            error = classify(payload, response.status_code)

        self.logger.info(
            f"API error {error.status} ({error.code}), request id: {error.request_id}"
        )
        return error

    def remove_background(
        self,
        image: ImageInput,
        options: Optional[Union[RemoveBackgroundOptions, Dict[str, Any]]] = None,
    ) -> RemoveBackgroundResult:
        """
        Remove the background from an image.

        Args:
            image: ImageFile, bytes, bytearray, memoryview, file path or
                binary file object
            options: Processing options (model or dict with the same keys)

        Returns:
            Processed image data and metadata

        Raises:
            PoofError: If the API returns an error or the request times out
        """
        if options is None:
            options = RemoveBackgroundOptions()
        elif isinstance(options, dict):
            options = RemoveBackgroundOptions.model_validate(options)

        normalized = self.normalizer.normalize(image)
        files = {
            "image_file": (normalized.filename, normalized.data, normalized.content_type)
        }

        response, body = self._request(
            "POST", "/remove", files=files, data=options.to_form_fields()
        )

        metadata = ProcessingMetadata(
            request_id=response.headers.get("X-Request-ID") or "",
            processing_time_ms=_int_header(response, "X-Processing-Time-Ms"),
            width=_int_header(response, "X-Image-Width"),
            height=_int_header(response, "X-Image-Height"),
            content_type=response.headers.get("Content-Type") or "image/png",
        )
        self.logger.debug(
            f"Removed background: request {metadata.request_id}, "
            f"{metadata.width}x{metadata.height} in {metadata.processing_time_ms} ms"
        )
        return RemoveBackgroundResult(data=body, metadata=metadata)

    def me(self) -> AccountInfo:
        """
        Get account information.

        Returns:
            Account info including plan and credit usage
        """
        _, body = self._request("GET", "/me", headers={"Accept": "application/json"})
        return AccountInfo.model_validate_json(body)
