from contextlib import contextmanager
from typing import Generator

from ..errors import RequestInformationError, SerializationError


@contextmanager
def serialization_errors() -> Generator[None, None, None]:
    """Context manager converting codec failures into SerializationError.

    Errors raised by this package pass through untouched so callers keep
    seeing e.g. UnsupportedTypeError or ArgumentError.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        SerializationError: For any other exception raised by the writer,
            its factory or a model's serialize method.
    """
    try:
        yield
    except RequestInformationError:
        raise
    except Exception as e:
        raise SerializationError(f"Could not serialize payload: {e}") from e
