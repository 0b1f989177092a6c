"""Tests for ResponseMapper."""

import httpx
import pytest

from brixie.core.client.errors import ErrorKind, NetworkError, NotFoundError, ParseError
from brixie.core.client.mapper import ResponseMapper
from brixie.core.client.models import LegoSet, LegoTheme, PagedResponse

from conftest import SAMPLE_SET


def response(status: int, content: bytes = b"") -> httpx.Response:
    return httpx.Response(status, content=content, request=httpx.Request("GET", "https://example.test/sets/"))


@pytest.fixture
def mapper():
    return ResponseMapper()


class TestResponseMapper:

    def test_success_decodes_body(self, mapper):
        resp = httpx.Response(200, json=SAMPLE_SET)
        result = mapper.map_response(resp, LegoSet)
        assert result.is_success
        assert result.value.set_num == "8880-1"

    def test_malformed_json_is_parse_error(self, mapper):
        result = mapper.map_response(response(200, b"<html>oops</html>"), LegoSet)
        assert isinstance(result.error, ParseError)
        assert result.error.cause is not None

    def test_wrong_shape_is_parse_error(self, mapper):
        body = b'{"count": 1, "next": null, "previous": null, "results": "not a list"}'
        result = mapper.map_response(response(200, body), PagedResponse[LegoTheme])
        assert result.error.kind is ErrorKind.PARSE

    def test_error_body_detail_used_as_message(self, mapper):
        result = mapper.map_response(response(404, b'{"detail": "Not found."}'), LegoSet)
        assert isinstance(result.error, NotFoundError)
        assert result.error.message == "Not found."
        assert result.error.status == 404

    def test_error_body_code_kept(self, mapper):
        result = mapper.map_response(response(400, b'{"detail": "Bad page", "code": "invalid"}'), LegoSet)
        assert result.error.kind is ErrorKind.BAD_REQUEST
        assert result.error.code == "invalid"

    def test_error_body_without_detail_uses_default_message(self, mapper):
        result = mapper.map_response(response(401, b"{}"), LegoSet)
        assert result.error.kind is ErrorKind.AUTHENTICATION
        assert result.error.message == "Authentication failed - invalid or missing API key"

    def test_undecodable_error_body_falls_back_to_status(self, mapper):
        result = mapper.map_response(response(502, b"<h1>Bad Gateway</h1>"), LegoSet)
        assert result.error.kind is ErrorKind.SERVER
        assert result.error.message == "HTTP 502: Bad Gateway"

    def test_empty_error_body_falls_back_to_status(self, mapper):
        result = mapper.map_response(response(418), LegoSet)
        assert result.error.kind is ErrorKind.GENERIC
        assert "418" in result.error.message

    def test_map_exception_wraps_cause(self, mapper):
        cause = httpx.ConnectError("Connection refused")
        error = mapper.map_exception(cause)
        assert isinstance(error, NetworkError)
        assert error.cause is cause
        assert "Connection refused" in error.message

    def test_map_exception_passes_api_errors_through(self, mapper):
        error = NotFoundError()
        assert mapper.map_exception(error) is error
