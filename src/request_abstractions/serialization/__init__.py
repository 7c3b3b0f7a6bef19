from ._json_serialization_writer import (
    JsonSerializationWriter,
    JsonSerializationWriterFactory,
)
from ._parsable import Parsable
from ._scalar import ScalarKind, write_scalar_values
from ._serialization_writer import SerializationWriter
from ._serialization_writer_factory import (
    SerializationWriterFactory,
    SerializationWriterFactoryRegistry,
    clean_content_type,
)

__all__ = [
    "JsonSerializationWriter",
    "JsonSerializationWriterFactory",
    "Parsable",
    "ScalarKind",
    "SerializationWriter",
    "SerializationWriterFactory",
    "SerializationWriterFactoryRegistry",
    "clean_content_type",
    "write_scalar_values",
]
