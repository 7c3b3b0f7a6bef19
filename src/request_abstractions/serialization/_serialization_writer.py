from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from types import TracebackType
from typing import Any, Iterable, Optional
from uuid import UUID

from ._parsable import Parsable


class SerializationWriter(ABC):
    """Writes values of a payload for a given content type.

    A writer is a scoped resource: acquire it right before use and release it
    with ``close()``, or use it as a context manager.
    """

    @abstractmethod
    def write_str_value(self, key: Optional[str], value: Optional[str]) -> None:
        pass

    @abstractmethod
    def write_bool_value(self, key: Optional[str], value: Optional[bool]) -> None:
        pass

    @abstractmethod
    def write_int_value(self, key: Optional[str], value: Optional[int]) -> None:
        pass

    @abstractmethod
    def write_float_value(self, key: Optional[str], value: Optional[float]) -> None:
        pass

    @abstractmethod
    def write_decimal_value(
        self, key: Optional[str], value: Optional[Decimal]
    ) -> None:
        pass

    @abstractmethod
    def write_uuid_value(self, key: Optional[str], value: Optional[UUID]) -> None:
        pass

    @abstractmethod
    def write_datetime_value(
        self, key: Optional[str], value: Optional[datetime]
    ) -> None:
        pass

    @abstractmethod
    def write_date_value(self, key: Optional[str], value: Optional[date]) -> None:
        pass

    @abstractmethod
    def write_time_value(self, key: Optional[str], value: Optional[time]) -> None:
        pass

    @abstractmethod
    def write_timedelta_value(
        self, key: Optional[str], value: Optional[timedelta]
    ) -> None:
        pass

    @abstractmethod
    def write_collection_of_primitive_values(
        self, key: Optional[str], values: Optional[Iterable[Any]]
    ) -> None:
        pass

    @abstractmethod
    def write_object_value(
        self, key: Optional[str], value: Optional[Parsable]
    ) -> None:
        pass

    @abstractmethod
    def write_collection_of_object_values(
        self, key: Optional[str], values: Optional[Iterable[Parsable]]
    ) -> None:
        pass

    @abstractmethod
    def get_serialized_content(self) -> bytes:
        """Gets the payload written so far.

        Returns:
            bytes: The serialized payload.
        """
        pass

    def close(self) -> None:
        """Releases the resources held by the writer."""
        pass

    def __enter__(self) -> "SerializationWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
