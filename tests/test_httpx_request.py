"""Tests for building httpx requests from a RequestInformation."""

import io

import httpx
import pytest

from request_abstractions import (
    HttpMethod,
    PreconditionError,
    RequestInformation,
    TimeoutOption,
    to_httpx_request,
)
from tests.utils.fakes import FakeRequestAdapter


@pytest.fixture
def users_request() -> RequestInformation:
    request_info = RequestInformation(
        HttpMethod.POST,
        "{+baseurl}/users{?dryRun}",
        {"baseurl": "https://api.example.com"},
    )
    request_info.add_query_parameter("dryRun", True)
    request_info.add_request_header("Accept", "application/json")
    return request_info


class TestToHttpxRequest:
    def test_builds_request(
        self, users_request: RequestInformation, json_adapter: FakeRequestAdapter
    ):
        users_request.set_content_from_scalar(json_adapter, "application/json", "ada")

        request = to_httpx_request(users_request)

        assert request.method == "POST"
        assert request.url == httpx.URL("https://api.example.com/users?dryRun=true")
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json"
        assert request.content == b'"ada"'

    def test_stream_content_is_read(self, users_request: RequestInformation):
        users_request.set_stream_content(io.BytesIO(b"\x00\x01"))

        request = to_httpx_request(users_request)

        assert request.content == b"\x00\x01"
        assert request.headers["Content-Type"] == "application/octet-stream"

    def test_timeout_option_is_forwarded(self, users_request: RequestInformation):
        users_request.add_request_options([TimeoutOption(timeout=2.5)])

        request = to_httpx_request(users_request)

        assert request.extensions["timeout"] == httpx.Timeout(2.5).as_dict()

    def test_requires_http_method(self):
        request_info = RequestInformation(url_template="https://api.example.com")

        with pytest.raises(PreconditionError, match="http_method"):
            to_httpx_request(request_info)
