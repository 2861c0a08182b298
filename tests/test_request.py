"""Tests for the request descriptor and its httpx conversion."""

import pytest
from unittest.mock import patch, MagicMock

from src.translate_client.config import Settings
from src.translate_client.exceptions import InvalidArgument
from src.translate_client.input.translate_text_request import TranslateTextRequest
from src.translate_client.request import Request, encode_json_body


@pytest.fixture
def descriptor():
    """Descriptor for a valid TranslateText call."""
    return TranslateTextRequest(Text="Hello", SourceLanguageCode="en", TargetLanguageCode="fr").request()


class TestEncodeJsonBody:
    """Test body encoding."""

    def test_empty_payload(self):
        """Test an empty payload encodes to the empty object."""
        assert encode_json_body({}) == b"{}"

    def test_compact_output(self):
        """Test no whitespace is added between tokens."""
        assert encode_json_body({"a": [1, 2], "b": "c"}) == b'{"a":[1,2],"b":"c"}'


class TestToHttpx:
    """Test conversion to httpx requests."""

    def test_explicit_endpoint(self, descriptor):
        """Test the endpoint argument is used as the base URL."""
        request = descriptor.to_httpx("https://translate.eu-west-1.amazonaws.com")

        assert request.method == "POST"
        assert str(request.url) == "https://translate.eu-west-1.amazonaws.com/"
        assert request.headers["X-Amz-Target"] == "AWSShineFrontendService_20170701.TranslateText"
        assert request.headers["Content-Type"] == "application/x-amz-json-1.1"
        assert request.content == descriptor.body

    def test_endpoint_from_settings(self, descriptor):
        """Test the configured endpoint is used when none is passed."""
        mock_settings = MagicMock(spec=Settings)
        mock_settings.translate_endpoint = "http://localhost:4566/"

        with patch("src.translate_client.request.get_settings", return_value=mock_settings):
            request = descriptor.to_httpx()

        assert str(request.url) == "http://localhost:4566/"

    def test_missing_endpoint(self, descriptor):
        """Test conversion fails without any endpoint."""
        mock_settings = MagicMock(spec=Settings)
        mock_settings.translate_endpoint = None

        with patch("src.translate_client.request.get_settings", return_value=mock_settings):
            with pytest.raises(InvalidArgument, match="TRANSLATE_ENDPOINT"):
                descriptor.to_httpx()

    def test_query_parameters(self):
        """Test query parameters are carried into the URL."""
        request = Request(method="GET", uri="/path", query={"a": "1"}).to_httpx("https://example.com")

        assert str(request.url) == "https://example.com/path?a=1"
