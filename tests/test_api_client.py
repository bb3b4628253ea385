"""Tests for the generation service HTTP client."""

import json

import httpx
import pytest


def make_request():
    from copygen.models import GenerationRequest

    return GenerationRequest(niche="Tech", keywords="AI", cta="Learn more")


def make_client(handler, **kwargs):
    from copygen.ui.api_client import GenerationClient

    return GenerationClient(
        url="http://testserver/generate-content",
        api_url="http://testserver",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestClientConfiguration:
    """Test GenerationClient initialization."""

    def test_explicit_url(self):
        """Test that an explicit URL wins over settings."""
        from copygen.ui.api_client import GenerationClient

        client = GenerationClient(url="http://example.com/fn", timeout=3.0)

        assert client.url == "http://example.com/fn"
        assert client.timeout == 3.0

    def test_default_url_from_settings(self):
        """Test the default URL joins api_url and the function name."""
        from copygen.config import get_settings
        from copygen.ui.api_client import GenerationClient

        client = GenerationClient()

        assert client.url == get_settings().generation_url
        assert client.url.endswith("/generate-content")

    def test_settings_generation_url(self, mock_settings):
        """Test slashes are normalized when joining the URL."""
        mock_settings.api_url = "http://testserver/"
        mock_settings.generation_function = "/generate-content"

        assert mock_settings.generation_url == "http://testserver/generate-content"


class TestGenerate:
    """Test GenerationClient.generate."""

    def test_posts_payload_and_returns_content(self):
        """Test request body and content extraction."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"content": "Great copy"})

        content = make_client(handler).generate(make_request())

        assert content == "Great copy"
        [request] = seen
        assert request.method == "POST"
        assert str(request.url) == "http://testserver/generate-content"
        assert json.loads(request.content) == {
            "contentType": "BlogPost",
            "niche": "Tech",
            "tone": "Friendly",
            "wordCount": "150",
            "keywords": "AI",
            "cta": "Learn more",
        }

    def test_content_is_not_altered(self):
        """Test that whitespace in content is preserved."""

        def handler(request):
            return httpx.Response(200, json={"content": "  spaced \n"})

        assert make_client(handler).generate(make_request()) == "  spaced \n"

    @pytest.mark.parametrize(
        "body,expected",
        [
            ({"error": "Quota exceeded"}, "Quota exceeded"),
            ({"detail": "Copy writer not initialized"}, "Copy writer not initialized"),
            ({"error": {"message": "Nested"}}, "Nested"),
            ({"error": ""}, None),
            (["unexpected"], None),
        ],
    )
    def test_service_error_message(self, body, expected):
        """Test that the service error text is surfaced."""
        from copygen.errors import RemoteGenerationError

        def handler(request):
            return httpx.Response(500, json=body)

        with pytest.raises(RemoteGenerationError) as exc_info:
            make_client(handler).generate(make_request())

        assert exc_info.value.message == expected
        assert exc_info.value.status_code == 500

    def test_non_json_error_body(self):
        """Test an error status with a plain-text body."""
        from copygen.errors import RemoteGenerationError

        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(RemoteGenerationError) as exc_info:
            make_client(handler).generate(make_request())

        assert exc_info.value.message is None
        assert exc_info.value.status_code == 502

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, json={"text": "wrong field"}),
            httpx.Response(200, json={"content": 42}),
            httpx.Response(200, json={"content": ""}),
            httpx.Response(200, text="not json"),
        ],
    )
    def test_malformed_success_response(self, response):
        """Test that a success without usable content is reported."""
        from copygen.errors import MalformedResponseError

        def handler(request):
            return response

        with pytest.raises(MalformedResponseError) as exc_info:
            make_client(handler).generate(make_request())

        assert exc_info.value.message

    def test_timeout(self):
        """Test that a timeout becomes a RemoteGenerationError."""
        from copygen.errors import RemoteGenerationError

        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(RemoteGenerationError) as exc_info:
            make_client(handler, timeout=2.0).generate(make_request())

        assert "2 seconds" in exc_info.value.message

    def test_transport_error(self):
        """Test that connection failures become a RemoteGenerationError."""
        from copygen.errors import RemoteGenerationError

        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(RemoteGenerationError) as exc_info:
            make_client(handler).generate(make_request())

        assert exc_info.value.message == "Connection refused"
        assert exc_info.value.status_code is None


class TestHealthCheck:
    """Test GenerationClient.health_check."""

    def test_healthy(self):
        """Test that /health under the service base URL is queried."""
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={"status": "ok"})

        assert make_client(handler).health_check() is True
        assert seen == ["http://testserver/health"]

    def test_nested_function_path(self, mock_settings):
        """Test that a multi-segment function path does not change the health URL."""
        from copygen.ui.api_client import GenerationClient

        mock_settings.generation_function = "functions/v1/generate-content"
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={"status": "ok"})

        client = GenerationClient(
            url=mock_settings.generation_url,
            api_url=mock_settings.api_url,
            transport=httpx.MockTransport(handler),
        )

        assert client.url == "http://testserver/functions/v1/generate-content"
        assert client.health_check() is True
        assert seen == ["http://testserver/health"]

    def test_api_url_defaults_to_settings(self):
        """Test that the base URL comes from settings without a trailing slash."""
        from copygen.config import get_settings
        from copygen.ui.api_client import GenerationClient

        client = GenerationClient()

        assert client.api_url == get_settings().api_url.rstrip("/")

    def test_unreachable(self):
        """Test that connection errors report unhealthy."""

        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        assert make_client(handler).health_check() is False
