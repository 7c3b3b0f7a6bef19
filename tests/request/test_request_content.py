"""Tests for setting the body of a RequestInformation."""

import io
import json
import uuid
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import IntEnum

import pytest

from request_abstractions import (
    ArgumentError,
    RequestInformation,
    SerializationError,
    UnsupportedTypeError,
)
from tests.utils.fakes import (
    FakeRequestAdapter,
    RecordingWriterFactory,
    User,
)

JSON = "application/json"


class Priority(IntEnum):
    LOW = 1


class TestStreamContent:
    def test_sets_binary_content_type(self, request_info: RequestInformation):
        stream = io.BytesIO(b"binary")

        request_info.set_stream_content(stream)

        assert request_info.content is stream
        assert request_info.request_headers == {
            "content-type": "application/octet-stream"
        }

    def test_overwrites_previous_content_type(
        self, request_info: RequestInformation, adapter: FakeRequestAdapter
    ):
        request_info.set_content_from_scalar(adapter, JSON, "text")

        request_info.set_stream_content(b"raw")

        assert request_info.content == b"raw"
        assert request_info.request_headers["content-type"] == "application/octet-stream"

    def test_requires_a_value(self, request_info: RequestInformation):
        with pytest.raises(ArgumentError):
            request_info.set_stream_content(None)  # type: ignore[arg-type]


class TestParsableContent:
    def test_single_value_is_written_as_object(
        self,
        request_info: RequestInformation,
        adapter: FakeRequestAdapter,
        writer_factory: RecordingWriterFactory,
    ):
        user = User("ada")

        request_info.set_content_from_parsable(adapter, JSON, user)

        writer = writer_factory.writer
        assert writer.calls == [("write_object_value", None, user)]
        assert writer.closed
        assert request_info.content == b"['write_object_value']"
        assert request_info.request_headers == {"content-type": JSON}

    def test_several_values_are_written_as_collection(
        self,
        request_info: RequestInformation,
        adapter: FakeRequestAdapter,
        writer_factory: RecordingWriterFactory,
    ):
        users = [User("ada"), User("grace")]

        request_info.set_content_from_parsable(adapter, JSON, *users)

        assert writer_factory.writer.calls == [
            ("write_collection_of_object_values", None, users)
        ]

    def test_json_payload(
        self, request_info: RequestInformation, json_adapter: FakeRequestAdapter
    ):
        request_info.set_content_from_parsable(
            json_adapter, "application/json; charset=utf-8", User("ada", 36), User("bob")
        )

        assert json.loads(request_info.content) == [
            {"name": "ada", "age": 36},
            {"name": "bob"},
        ]
        assert request_info.request_headers == {
            "content-type": "application/json; charset=utf-8"
        }

    def test_requires_values(
        self, request_info: RequestInformation, adapter: FakeRequestAdapter
    ):
        with pytest.raises(ArgumentError, match="values cannot be empty"):
            request_info.set_content_from_parsable(adapter, JSON)

    def test_write_failure_releases_writer(self, request_info: RequestInformation):
        factory = RecordingWriterFactory(fail_on="write_object_value")
        adapter = FakeRequestAdapter(factory)

        with pytest.raises(SerializationError) as exc_info:
            request_info.set_content_from_parsable(adapter, JSON, User("ada"))

        assert isinstance(exc_info.value.__cause__, OSError)
        assert factory.writer.closed
        assert request_info.content is None
        assert request_info.request_headers == {}

    def test_close_failure_leaves_request_unchanged(
        self, request_info: RequestInformation
    ):
        factory = RecordingWriterFactory(fail_on="close")
        user = User("ada")
        request_info.add_request_header("Content-Type", "text/plain")

        with pytest.raises(SerializationError):
            request_info.set_content_from_parsable(
                FakeRequestAdapter(factory), JSON, user
            )

        assert factory.writer.calls == [("write_object_value", None, user)]
        assert request_info.content is None
        assert request_info.request_headers == {"content-type": "text/plain"}

    def test_unregistered_content_type_fails(
        self, request_info: RequestInformation, json_adapter: FakeRequestAdapter
    ):
        with pytest.raises(SerializationError, match="application/xml"):
            request_info.set_content_from_parsable(
                json_adapter, "application/xml", User("ada")
            )


class TestScalarContent:
    @pytest.mark.parametrize(
        "value, method",
        [
            ("text", "write_str_value"),
            (True, "write_bool_value"),
            (42, "write_int_value"),
            (Decimal("1.50"), "write_decimal_value"),
            (1.5, "write_float_value"),
            (uuid.UUID(int=1), "write_uuid_value"),
            (datetime(2024, 1, 1, tzinfo=timezone.utc), "write_datetime_value"),
            (date(2024, 1, 1), "write_date_value"),
            (time(12, 30), "write_time_value"),
            (timedelta(days=1), "write_timedelta_value"),
        ],
    )
    def test_single_value_dispatch(
        self,
        request_info: RequestInformation,
        adapter: FakeRequestAdapter,
        writer_factory: RecordingWriterFactory,
        value,
        method,
    ):
        request_info.set_content_from_scalar(adapter, JSON, value)

        assert writer_factory.writer.calls == [(method, None, value)]
        assert writer_factory.writer.closed
        assert request_info.request_headers == {"content-type": JSON}

    def test_several_values_are_written_as_collection(
        self,
        request_info: RequestInformation,
        adapter: FakeRequestAdapter,
        writer_factory: RecordingWriterFactory,
    ):
        request_info.set_content_from_scalar(adapter, JSON, "a", "b")

        assert writer_factory.writer.calls == [
            ("write_collection_of_primitive_values", None, ["a", "b"])
        ]

    @pytest.mark.parametrize("value", [b"bytes", ["a"], object(), Priority.LOW, None])
    def test_unsupported_type_leaves_request_unchanged(
        self,
        request_info: RequestInformation,
        adapter: FakeRequestAdapter,
        writer_factory: RecordingWriterFactory,
        value,
    ):
        request_info.set_stream_content(b"previous")

        with pytest.raises(UnsupportedTypeError):
            request_info.set_content_from_scalar(adapter, "text/plain", value)

        assert writer_factory.writer.calls == []
        assert writer_factory.writer.closed
        assert request_info.content == b"previous"
        assert request_info.request_headers == {
            "content-type": "application/octet-stream"
        }

    @pytest.mark.parametrize("values", [("text",), ("a", "b")])
    def test_close_failure_leaves_request_unchanged(
        self, request_info: RequestInformation, values
    ):
        factory = RecordingWriterFactory(fail_on="close")
        request_info.set_stream_content(b"previous")

        with pytest.raises(SerializationError) as exc_info:
            request_info.set_content_from_scalar(
                FakeRequestAdapter(factory), JSON, *values
            )

        assert isinstance(exc_info.value.__cause__, OSError)
        assert factory.writer.closed
        assert request_info.content == b"previous"
        assert request_info.request_headers == {
            "content-type": "application/octet-stream"
        }

    def test_json_payload(
        self, request_info: RequestInformation, json_adapter: FakeRequestAdapter
    ):
        value = uuid.UUID("6f6a5bd1-2a0b-4f38-9d5e-3a1d3c1a0f11")

        request_info.set_content_from_scalar(json_adapter, JSON, value)

        assert json.loads(request_info.content) == str(value)

    @pytest.mark.parametrize(
        "adapter_value, content_type",
        [(None, JSON), ("adapter", ""), ("adapter", None)],
    )
    def test_required_arguments(
        self,
        request_info: RequestInformation,
        adapter: FakeRequestAdapter,
        adapter_value,
        content_type,
    ):
        request_adapter = adapter if adapter_value else None

        with pytest.raises(ArgumentError):
            request_info.set_content_from_scalar(request_adapter, content_type, "a")
