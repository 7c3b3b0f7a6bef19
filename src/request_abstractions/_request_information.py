import logging
from enum import Enum
from typing import Any, BinaryIO, Iterable, Optional, TypeVar, Union

import httpx

from ._headers import RequestHeaders
from ._http_method import HttpMethod
from ._query_parameters import extract_query_parameters
from ._request_adapter import RequestAdapter
from ._request_option import RequestOption, RequestOptions
from ._url_resolver import expand_url_template, parse_raw_url
from ._utils import serialization_errors
from ._utils.constants import BINARY_CONTENT_TYPE, HEADER_CONTENT_TYPE, RAW_URL_KEY
from .errors import ArgumentError
from .serialization import Parsable, SerializationWriter, write_scalar_values

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=RequestOption)


class RequestState(str, Enum):
    """Lifecycle of a request.

    A request is BUILDING until its URI is fixed, either explicitly through
    ``uri`` or by resolving a ``request-raw-url`` path parameter. It then stays
    RESOLVED: later changes to the template or parameters no longer affect
    the URL.
    """

    BUILDING = "building"
    RESOLVED = "resolved"


class RequestInformation:
    """Describes one outbound HTTP request before it is sent.

    Generated client methods create one instance per call, fill in the URL
    template, parameters, headers, options and body, and hand it to a request
    adapter which reads it once to send the request.

    Attributes:
        http_method: The HTTP verb of the request.
        url_template: RFC 6570 template of the request URL.
        path_parameters: Values expanded into the path of the URL template.
        content: The request body, if any.
    """

    def __init__(
        self,
        http_method: Optional[HttpMethod] = None,
        url_template: Optional[str] = None,
        path_parameters: Optional[dict[str, Any]] = None,
    ) -> None:
        self.http_method = http_method
        self.url_template = url_template
        self.path_parameters: dict[str, Any] = dict(path_parameters or {})
        self.content: Union[bytes, BinaryIO, None] = None

        self._uri: Optional[httpx.URL] = None
        self._query_parameters: dict[str, Any] = {}
        self._headers = RequestHeaders()
        self._request_options = RequestOptions()

    @property
    def state(self) -> RequestState:
        return RequestState.BUILDING if self._uri is None else RequestState.RESOLVED

    @property
    def uri(self) -> Optional[httpx.URL]:
        """The explicitly set URI of the request, if any."""
        return self._uri

    @uri.setter
    def uri(self, value: Union[httpx.URL, str]) -> None:
        if value is None:
            raise ArgumentError.missing("uri")
        self._uri = httpx.URL(value)
        self._query_parameters.clear()
        if self.path_parameters is not None:
            self.path_parameters.clear()

    def resolve(self) -> httpx.URL:
        """Gets the URL of the request.

        The URL is, in order of precedence: the explicitly set ``uri``; the
        ``request-raw-url`` path parameter, which is then fixed as ``uri``;
        or the expansion of ``url_template`` with the query and path
        parameters.

        Returns:
            httpx.URL: The URL to send the request to.

        Raises:
            PreconditionError: If the URL template is not set.
            ConfigurationError: If the template requires a ``baseurl`` path
                parameter that is missing, or the raw URL is invalid.
        """
        if self._uri is not None:
            return self._uri

        raw_url = (self.path_parameters or {}).get(RAW_URL_KEY)
        if isinstance(raw_url, str):
            logger.debug(f"Resolving request from {RAW_URL_KEY}: {raw_url}")
            self.uri = parse_raw_url(raw_url)
            return self._uri

        url = expand_url_template(
            self.url_template, self.path_parameters, self._query_parameters
        )
        logger.debug(f"Resolved {self.url_template} to {url}")
        return url

    @property
    def query_parameters(self) -> dict[str, Any]:
        return dict(self._query_parameters)

    def add_query_parameters(self, parameters: Optional[object]) -> None:
        """Adds the query parameters declared by an object.

        Args:
            parameters: A pydantic model, dataclass, mapping or plain object
                holding query parameter values. ``None`` is ignored.
        """
        if parameters is None:
            return
        self._query_parameters.update(extract_query_parameters(parameters))

    def add_query_parameter(self, name: str, value: Any) -> None:
        if not name:
            raise ArgumentError.missing("name")
        if value is None:
            raise ArgumentError.missing("value")
        self._query_parameters[name] = value

    def remove_query_parameter(self, name: str) -> None:
        if not name:
            raise ArgumentError.missing("name")
        self._query_parameters.pop(name, None)

    @property
    def request_headers(self) -> dict[str, str]:
        return self._headers.to_dict()

    def add_request_headers(self, headers: Optional[dict[str, str]]) -> None:
        self._headers.add_all(headers)

    def add_request_header(self, key: str, value: str) -> None:
        self._headers.add(key, value)

    def remove_request_header(self, key: str) -> None:
        self._headers.remove(key)

    @property
    def request_options(self) -> list[RequestOption]:
        """The options of the request, at most one per kind."""
        return self._request_options.values()

    def add_request_options(self, options: Optional[Iterable[RequestOption]]) -> None:
        self._request_options.add(options)

    def remove_request_options(self, *options: RequestOption) -> None:
        self._request_options.remove(*options)

    def get_request_option(self, kind: type[T]) -> Optional[T]:
        return self._request_options.get(kind)

    def set_stream_content(self, value: Union[bytes, BinaryIO]) -> None:
        """Sets a binary body, sent as ``application/octet-stream``."""
        if value is None:
            raise ArgumentError.missing("value")
        self.content = value
        self._headers.add(HEADER_CONTENT_TYPE, BINARY_CONTENT_TYPE)

    def set_content_from_parsable(
        self,
        request_adapter: RequestAdapter,
        content_type: str,
        *values: Parsable,
    ) -> None:
        """Sets the body from one model, or from a collection of models.

        Args:
            request_adapter: The adapter providing the serialization writer.
            content_type: The content type to serialize the models to.
            *values: The models to serialize. One value is written as an
                object, several as a collection.

        Raises:
            ArgumentError: If no value is given.
            SerializationError: If the payload cannot be serialized.
        """
        with serialization_errors():
            with self._get_serialization_writer(
                request_adapter, content_type, values
            ) as writer:
                if len(values) == 1:
                    writer.write_object_value(None, values[0])
                else:
                    writer.write_collection_of_object_values(None, list(values))
                content = writer.get_serialized_content()
        self._set_content(content, content_type)

    def set_content_from_scalar(
        self,
        request_adapter: RequestAdapter,
        content_type: str,
        *values: Any,
    ) -> None:
        """Sets the body from one scalar value, or from a collection of them.

        A single value must be one of the kinds of
        :class:`~request_abstractions.serialization.ScalarKind`, matched on its
        exact type. Several values are written as a collection of primitives.

        Raises:
            ArgumentError: If no value is given.
            UnsupportedTypeError: If a single value has an unsupported type.
                Content and headers are left untouched.
            SerializationError: If the payload cannot be serialized.
        """
        with serialization_errors():
            with self._get_serialization_writer(
                request_adapter, content_type, values
            ) as writer:
                write_scalar_values(writer, values)
                content = writer.get_serialized_content()
        self._set_content(content, content_type)

    def _get_serialization_writer(
        self,
        request_adapter: RequestAdapter,
        content_type: str,
        values: tuple[Any, ...],
    ) -> SerializationWriter:
        if request_adapter is None:
            raise ArgumentError.missing("request_adapter")
        if not content_type:
            raise ArgumentError.missing("content_type")
        if not values:
            raise ArgumentError("values cannot be empty")

        writer = request_adapter.get_serialization_writer_factory().get_serialization_writer(
            content_type
        )
        logger.debug(f"Serializing {len(values)} value(s) as {content_type}")
        return writer

    def _set_content(self, content: bytes, content_type: str) -> None:
        self.content = content
        self._headers.add(HEADER_CONTENT_TYPE, content_type)

    def __repr__(self) -> str:
        return (
            f"RequestInformation(http_method={self.http_method!r}, "
            f"url_template={self.url_template!r}, state={self.state.value!r})"
        )
