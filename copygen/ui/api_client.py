"""API client for calling the generate-content function."""

import logging
from typing import Any

import httpx

from copygen.config import get_settings
from copygen.errors import MalformedResponseError, RemoteGenerationError
from copygen.models import GenerationRequest

logger = logging.getLogger(__name__)


def extract_error_message(response: httpx.Response) -> str | None:
    """Pull the human-readable error text out of an error response.

    The generation service answers ``{"error": "..."}``; FastAPI's own
    errors answer ``{"detail": "..."}``. Anything else yields None.
    """
    try:
        data = response.json()
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None
    for key in ("error", "message", "detail"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value
        if isinstance(value, dict):
            nested = value.get("message")
            if isinstance(nested, str) and nested.strip():
                return nested
    return None


class GenerationClient:
    """Client for the copy generation service."""

    def __init__(
        self,
        url: str | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            url: Full URL of the generate-content function. Defaults to
                settings.generation_url.
            api_url: Base URL of the service, used for /health. Defaults to
                settings.api_url.
            timeout: Seconds to wait for the service. Defaults to
                settings.request_timeout.
            transport: Optional httpx transport, mainly for tests.
        """
        settings = get_settings()
        self.url = url or settings.generation_url
        self.api_url = (api_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport

    def _client(self, timeout: float) -> httpx.Client:
        return httpx.Client(timeout=timeout, transport=self.transport)

    def health_check(self) -> bool:
        """Check if the generation service is reachable.

        Returns:
            True if the service answers /health with 200, False otherwise.
        """
        try:
            with self._client(5.0) as client:
                response = client.get(f"{self.api_url}/health")
                return response.status_code == 200
        except httpx.RequestError:
            return False

    def generate(self, request: GenerationRequest) -> str:
        """Generate copy for a request.

        Args:
            request: Validated generation request.

        Returns:
            The generated content string.

        Raises:
            RemoteGenerationError: If the call fails, times out or the
                service reports an error.
            MalformedResponseError: If the service answers without a
                string ``content`` field.
        """
        payload = request.to_payload()
        logger.debug(f"POST {self.url} {payload}")

        try:
            with self._client(self.timeout) as client:
                response = client.post(self.url, json=payload)
        except httpx.TimeoutException as e:
            logger.error(f"Generation request timed out after {self.timeout}s: {e}")
            raise RemoteGenerationError(
                f"The generation service did not respond within {self.timeout:g} seconds."
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request error during generation: {e}")
            raise RemoteGenerationError(str(e) or None) from e

        if response.is_error:
            message = extract_error_message(response)
            logger.error(f"Generation service returned {response.status_code}: {message}")
            raise RemoteGenerationError(message, status_code=response.status_code)

        return self._parse_content(response)

    def _parse_content(self, response: httpx.Response) -> str:
        try:
            data: Any = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                "The generation service returned a response that is not valid JSON.",
                status_code=response.status_code,
            ) from e

        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, str) or not content:
            raise MalformedResponseError(
                "The generation service response did not include any content.",
                status_code=response.status_code,
            )
        return content
