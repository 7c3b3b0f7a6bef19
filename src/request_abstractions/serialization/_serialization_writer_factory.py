import logging
import re
from abc import ABC, abstractmethod

from ..errors import ArgumentError, SerializationError
from ._serialization_writer import SerializationWriter

logger = logging.getLogger(__name__)

_VENDOR_SPECIFIC = re.compile(r"[^/]+\+", re.IGNORECASE)


class SerializationWriterFactory(ABC):
    """Creates serialization writers for a content type."""

    @abstractmethod
    def get_valid_content_type(self) -> str:
        """Gets the content type this factory creates writers for."""
        pass

    @abstractmethod
    def get_serialization_writer(self, content_type: str) -> SerializationWriter:
        """Creates a new writer for the given content type.

        Args:
            content_type: The content type of the payload to write.

        Returns:
            SerializationWriter: A fresh writer, owned by the caller.
        """
        pass


def clean_content_type(content_type: str) -> str:
    """Reduces a content type to the key used to look up its factory.

    Examples:
        >>> clean_content_type("application/vnd.github+json; charset=utf-8")
        'application/json'
    """
    cleaned = content_type.split(";", 1)[0].strip().lower()
    media_type, _, subtype = cleaned.partition("/")
    if "+" in subtype:
        subtype = _VENDOR_SPECIFIC.sub("", subtype)
    return f"{media_type}/{subtype}" if subtype else media_type


class SerializationWriterFactoryRegistry(SerializationWriterFactory):
    """Dispatches writer creation to the factory registered for a content type."""

    def __init__(self) -> None:
        self.content_type_associated_factories: dict[
            str, SerializationWriterFactory
        ] = {}

    def register(self, factory: SerializationWriterFactory) -> None:
        content_type = clean_content_type(factory.get_valid_content_type())
        self.content_type_associated_factories[content_type] = factory
        logger.debug(f"Registered serialization writer factory for {content_type}")

    def get_valid_content_type(self) -> str:
        raise RuntimeError(
            "The registry supports multiple content types. Get the registered factory instead."
        )

    def get_serialization_writer(self, content_type: str) -> SerializationWriter:
        if not content_type:
            raise ArgumentError.missing("content_type")

        cleaned = clean_content_type(content_type)
        factory = self.content_type_associated_factories.get(cleaned)
        if factory is None:
            raise SerializationError(
                f"Content type {cleaned} does not have a factory registered to be serialized"
            )
        return factory.get_serialization_writer(cleaned)
