from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._serialization_writer import SerializationWriter


class Parsable(ABC):
    """A model that knows how to write itself through a SerializationWriter."""

    @abstractmethod
    def serialize(self, writer: "SerializationWriter") -> None:
        """Writes the model's members to the given writer.

        Args:
            writer: The writer to write the members to.
        """
        pass
