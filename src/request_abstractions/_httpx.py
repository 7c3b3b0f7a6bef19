import httpx

from ._request_information import RequestInformation
from ._request_option import TimeoutOption
from .errors import PreconditionError


def to_httpx_request(request_info: RequestInformation) -> httpx.Request:
    """Builds the httpx request described by a RequestInformation.

    The request is not sent. A readable stream body is read into memory, and a
    TimeoutOption is carried in the request extensions the way httpx clients
    expect it.

    Args:
        request_info: The request to build.

    Returns:
        httpx.Request: The request, ready to be sent by an httpx client.

    Raises:
        PreconditionError: If the request has no HTTP method.
    """
    if request_info.http_method is None:
        raise PreconditionError("http_method cannot be None when building the request")

    content = request_info.content
    if content is not None and hasattr(content, "read"):
        content = content.read()

    extensions = {}
    timeout_option = request_info.get_request_option(TimeoutOption)
    if timeout_option is not None and timeout_option.timeout is not None:
        extensions["timeout"] = httpx.Timeout(timeout_option.timeout).as_dict()

    return httpx.Request(
        request_info.http_method.value,
        request_info.resolve(),
        headers=request_info.request_headers,
        content=content,
        extensions=extensions,
    )
