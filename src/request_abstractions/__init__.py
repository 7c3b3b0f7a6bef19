from ._headers import RequestHeaders
from ._http_method import HttpMethod
from ._httpx import to_httpx_request
from ._query_parameters import extract_query_parameters, query_parameter
from ._request_adapter import RequestAdapter
from ._request_information import RequestInformation, RequestState
from ._request_option import (
    RequestOption,
    RequestOptions,
    RetryOption,
    TimeoutOption,
)
from .errors import (
    ArgumentError,
    ConfigurationError,
    PreconditionError,
    RequestInformationError,
    SerializationError,
    UnsupportedTypeError,
)

__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "HttpMethod",
    "PreconditionError",
    "RequestAdapter",
    "RequestHeaders",
    "RequestInformation",
    "RequestInformationError",
    "RequestOption",
    "RequestOptions",
    "RequestState",
    "RetryOption",
    "SerializationError",
    "TimeoutOption",
    "UnsupportedTypeError",
    "extract_query_parameters",
    "query_parameter",
    "to_httpx_request",
]
