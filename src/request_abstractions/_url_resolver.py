from enum import Enum
from typing import Any, Mapping, Optional

import httpx
from pydantic_core import to_jsonable_python
from stduritemplate import StdUriTemplate

from ._utils.constants import BASE_URL_KEY, BASE_URL_TOKEN, RAW_URL_KEY
from .errors import ConfigurationError, PreconditionError


def _template_value(value: Any) -> Any:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (str, int, float)):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_template_value(item) for item in value if item is not None]
    return to_jsonable_python(value)


def parse_raw_url(raw_url: str) -> httpx.URL:
    """Parses the value of the ``request-raw-url`` path parameter.

    Raises:
        ConfigurationError: If the value is not a valid URL.
    """
    try:
        return httpx.URL(raw_url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(
            f"The {RAW_URL_KEY} path parameter is not a valid URL: {raw_url}"
        ) from e


def expand_url_template(
    url_template: Optional[str],
    path_parameters: Optional[Mapping[str, Any]],
    query_parameters: Optional[Mapping[str, Any]],
) -> httpx.URL:
    """Expands a URI template with the path and query parameters of a request.

    Path parameters take precedence over query parameters with the same name.
    Parameters set to ``None`` are removed before expansion, so RFC 6570
    drops the variables that reference them.

    Args:
        url_template: An RFC 6570 URI template, e.g. ``{+baseurl}/users{?filter}``.
        path_parameters: Values for the path (and host) of the template.
        query_parameters: Values for the query expressions of the template.

    Returns:
        httpx.URL: The expanded URL.

    Raises:
        PreconditionError: If the template or one of the mappings is missing.
        ConfigurationError: If the template uses ``{+baseurl}`` and no
            ``baseurl`` path parameter is set.
    """
    if url_template is None:
        raise PreconditionError("url_template cannot be None when building the url")
    if query_parameters is None:
        raise PreconditionError(
            "query_parameters cannot be None when building the url"
        )
    if path_parameters is None:
        raise PreconditionError("path_parameters cannot be None when building the url")

    if BASE_URL_KEY not in path_parameters and BASE_URL_TOKEN in url_template.lower():
        raise ConfigurationError()

    substitutions = {
        name: _template_value(value)
        for name, value in {**query_parameters, **path_parameters}.items()
        if value is not None
    }
    return httpx.URL(StdUriTemplate.expand(url_template, substitutions))
