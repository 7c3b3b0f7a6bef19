from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Iterable, Optional
from uuid import UUID

from pydantic_core import to_json

from .._utils.constants import JSON_CONTENT_TYPE
from ..errors import ArgumentError
from ._parsable import Parsable
from ._serialization_writer import SerializationWriter
from ._serialization_writer_factory import (
    SerializationWriterFactory,
    clean_content_type,
)

_UNSET = object()


class JsonSerializationWriter(SerializationWriter):
    """Writes a JSON payload.

    Values are buffered as Python objects and encoded once by
    ``get_serialized_content``. Datetimes, dates and times are written in
    ISO 8601, durations as ISO 8601 durations, UUIDs and decimals as strings.
    A value written with ``key=None`` becomes the root of the document; keyed
    values become members of the object currently being written.
    """

    def __init__(self) -> None:
        self._root: Any = _UNSET
        self._objects: list[dict[str, Any]] = []
        self._closed = False

    def _write(self, key: Optional[str], value: Any) -> None:
        if self._closed:
            raise RuntimeError("The writer has been closed")

        if key is None:
            if self._objects:
                raise ValueError("Members of an object must have a key")
            self._root = value
            return

        if not self._objects:
            raise ValueError(f"Cannot write member '{key}' outside of an object")
        if value is not None:
            self._objects[-1][key] = value

    def _serialize_object(self, value: Parsable) -> dict[str, Any]:
        self._objects.append({})
        try:
            value.serialize(self)
        finally:
            members = self._objects.pop()
        return members

    def write_str_value(self, key: Optional[str], value: Optional[str]) -> None:
        self._write(key, value)

    def write_bool_value(self, key: Optional[str], value: Optional[bool]) -> None:
        self._write(key, value)

    def write_int_value(self, key: Optional[str], value: Optional[int]) -> None:
        self._write(key, value)

    def write_float_value(self, key: Optional[str], value: Optional[float]) -> None:
        self._write(key, value)

    def write_decimal_value(
        self, key: Optional[str], value: Optional[Decimal]
    ) -> None:
        self._write(key, value)

    def write_uuid_value(self, key: Optional[str], value: Optional[UUID]) -> None:
        self._write(key, value)

    def write_datetime_value(
        self, key: Optional[str], value: Optional[datetime]
    ) -> None:
        self._write(key, value)

    def write_date_value(self, key: Optional[str], value: Optional[date]) -> None:
        self._write(key, value)

    def write_time_value(self, key: Optional[str], value: Optional[time]) -> None:
        self._write(key, value)

    def write_timedelta_value(
        self, key: Optional[str], value: Optional[timedelta]
    ) -> None:
        self._write(key, value)

    def write_collection_of_primitive_values(
        self, key: Optional[str], values: Optional[Iterable[Any]]
    ) -> None:
        self._write(key, None if values is None else list(values))

    def write_object_value(
        self, key: Optional[str], value: Optional[Parsable]
    ) -> None:
        self._write(key, None if value is None else self._serialize_object(value))

    def write_collection_of_object_values(
        self, key: Optional[str], values: Optional[Iterable[Parsable]]
    ) -> None:
        if values is None:
            self._write(key, None)
            return
        self._write(key, [self._serialize_object(value) for value in values])

    def get_serialized_content(self) -> bytes:
        if self._root is _UNSET:
            return b""
        return to_json(self._root)

    def close(self) -> None:
        self._objects.clear()
        self._closed = True


class JsonSerializationWriterFactory(SerializationWriterFactory):
    def get_valid_content_type(self) -> str:
        return JSON_CONTENT_TYPE

    def get_serialization_writer(self, content_type: str) -> SerializationWriter:
        if not content_type:
            raise ArgumentError.missing("content_type")
        if clean_content_type(content_type) != JSON_CONTENT_TYPE:
            raise ArgumentError(
                f"Expected {JSON_CONTENT_TYPE} as content type, got {content_type}"
            )
        return JsonSerializationWriter()
