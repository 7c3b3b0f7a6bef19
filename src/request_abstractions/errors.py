class RequestInformationError(Exception):
    """Base class for errors raised while building a request."""

    def __init__(self, message: str = "The request could not be built."):
        self.message = message
        super().__init__(self.message)


class ArgumentError(RequestInformationError, ValueError):
    def __init__(self, message="A required argument is missing or empty."):
        super().__init__(message)

    @staticmethod
    def missing(name: str) -> "ArgumentError":
        return ArgumentError(f"The argument '{name}' cannot be None or empty.")


class PreconditionError(RequestInformationError):
    """Raised when the request is missing state needed for the current operation.

    For example resolving a URL without a URL template, or building a transport
    request without an HTTP method.
    """

    def __init__(self, message="The request is not ready to be resolved."):
        super().__init__(message)


class ConfigurationError(RequestInformationError):
    def __init__(
        self,
        message='PathParameters must contain a value for "baseurl" for the url to be built.',
    ):
        super().__init__(message)


class UnsupportedTypeError(RequestInformationError, TypeError):
    """Raised when a scalar value does not belong to the supported set of kinds."""

    def __init__(self, message="Unsupported type to serialize."):
        super().__init__(message)

    @staticmethod
    def create(value_type: type) -> "UnsupportedTypeError":
        return UnsupportedTypeError(
            f"Unknown type to serialize: {value_type.__module__}.{value_type.__qualname__}"
        )


class SerializationError(RequestInformationError):
    def __init__(self, message="Could not serialize payload."):
        super().__init__(message)
