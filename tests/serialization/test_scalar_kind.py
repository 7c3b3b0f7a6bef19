"""Tests for the closed set of scalar kinds."""

import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal

import pytest

from request_abstractions import UnsupportedTypeError
from request_abstractions.serialization import ScalarKind, write_scalar_values
from tests.utils.fakes import RecordingWriter


class TestScalarKind:
    @pytest.mark.parametrize(
        "value, kind",
        [
            ("", ScalarKind.STRING),
            (False, ScalarKind.BOOLEAN),
            (0, ScalarKind.INTEGER),
            (2**63, ScalarKind.INTEGER),
            (Decimal("0"), ScalarKind.DECIMAL),
            (0.0, ScalarKind.FLOAT),
            (uuid.uuid4(), ScalarKind.UUID),
            (datetime.now(), ScalarKind.DATETIME),
            (date.today(), ScalarKind.DATE),
            (time(), ScalarKind.TIME),
            (timedelta(), ScalarKind.DURATION),
        ],
    )
    def test_kind_of_supported_values(self, value, kind):
        assert ScalarKind.of(value) is kind

    def test_subclasses_are_not_matched(self):
        class Name(str):
            pass

        with pytest.raises(UnsupportedTypeError, match="Name"):
            ScalarKind.of(Name("x"))

    def test_every_kind_names_a_writer_primitive(self):
        writer = RecordingWriter()

        for kind in ScalarKind:
            assert callable(getattr(writer, kind.value))


class TestWriteScalarValues:
    def test_single_value(self):
        writer = RecordingWriter()

        write_scalar_values(writer, (3,))

        assert writer.calls == [("write_int_value", None, 3)]

    def test_collection_is_not_dispatched(self):
        writer = RecordingWriter()

        write_scalar_values(writer, ("a", object()))

        assert writer.calls[0][0] == "write_collection_of_primitive_values"
        assert len(writer.calls) == 1
