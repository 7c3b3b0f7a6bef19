"""Scalar kinds a request body can carry and their writer primitives."""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from ..errors import UnsupportedTypeError
from ._serialization_writer import SerializationWriter


class ScalarKind(str, Enum):
    """Closed set of scalar kinds supported as request content.

    The value of each member is the name of the SerializationWriter primitive
    used to write it.
    """

    STRING = "write_str_value"
    BOOLEAN = "write_bool_value"
    INTEGER = "write_int_value"
    DECIMAL = "write_decimal_value"
    FLOAT = "write_float_value"
    UUID = "write_uuid_value"
    DATETIME = "write_datetime_value"
    DATE = "write_date_value"
    TIME = "write_time_value"
    DURATION = "write_timedelta_value"

    @classmethod
    def of(cls, value: Any) -> "ScalarKind":
        """Gets the kind of a value from its exact runtime type.

        Subclasses are not matched: ``bool`` is not an ``int`` here, ``datetime``
        is not a ``date`` and an ``IntEnum`` member is not supported at all.

        Raises:
            UnsupportedTypeError: If the type is outside the supported set.
        """
        kind = _KINDS_BY_TYPE.get(type(value))
        if kind is None:
            raise UnsupportedTypeError.create(type(value))
        return kind

    def write(self, writer: SerializationWriter, value: Any) -> None:
        """Writes the value as the root of the payload."""
        getattr(writer, self.value)(None, value)


_KINDS_BY_TYPE: dict[type, ScalarKind] = {
    str: ScalarKind.STRING,
    bool: ScalarKind.BOOLEAN,
    int: ScalarKind.INTEGER,
    Decimal: ScalarKind.DECIMAL,
    float: ScalarKind.FLOAT,
    UUID: ScalarKind.UUID,
    datetime: ScalarKind.DATETIME,
    date: ScalarKind.DATE,
    time: ScalarKind.TIME,
    timedelta: ScalarKind.DURATION,
}


def write_scalar_values(writer: SerializationWriter, values: tuple[Any, ...]) -> None:
    """Writes one scalar as the payload root, or several as a collection.

    A collection is written as-is through
    ``write_collection_of_primitive_values``; its items are not dispatched
    one by one.
    """
    if len(values) == 1:
        ScalarKind.of(values[0]).write(writer, values[0])
    else:
        writer.write_collection_of_primitive_values(None, list(values))
