from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs a request can be sent with."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    PUT = "PUT"
    TRACE = "TRACE"
    HEAD = "HEAD"
