import pytest

from request_abstractions import RequestInformation
from request_abstractions.serialization import (
    JsonSerializationWriterFactory,
    SerializationWriterFactoryRegistry,
)
from tests.utils.fakes import FakeRequestAdapter, RecordingWriterFactory


@pytest.fixture
def request_info() -> RequestInformation:
    return RequestInformation()


@pytest.fixture
def writer_factory() -> RecordingWriterFactory:
    return RecordingWriterFactory()


@pytest.fixture
def adapter(writer_factory: RecordingWriterFactory) -> FakeRequestAdapter:
    return FakeRequestAdapter(writer_factory)


@pytest.fixture
def json_adapter() -> FakeRequestAdapter:
    """Adapter serializing through the JSON writer."""
    registry = SerializationWriterFactoryRegistry()
    registry.register(JsonSerializationWriterFactory())
    return FakeRequestAdapter(registry)
