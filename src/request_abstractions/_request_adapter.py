from abc import ABC, abstractmethod

from .serialization import SerializationWriterFactory


class RequestAdapter(ABC):
    """Executes resolved requests and gives access to the codecs they need.

    Implementations turn a RequestInformation into an actual network call.
    Building a request only relies on the serialization writer factory.
    """

    @abstractmethod
    def get_serialization_writer_factory(self) -> SerializationWriterFactory:
        """Gets the factory used to create writers for request bodies.

        Returns:
            SerializationWriterFactory: The factory for this adapter.
        """
        pass
