"""Derives query parameters from the parameter objects of generated clients.

Names are resolved from, in order of preference:

1. a ``__query_parameters__`` class attribute mapping attribute names to query
   parameter names. Only the attributes listed there are read;
2. pydantic model fields, using the field's alias when it has one;
3. dataclass fields, using ``metadata["query_parameter"]`` when present
   (see :func:`query_parameter`);
4. for any other object, the public names annotated or listed in
   ``__slots__`` on its classes, plus its instance attributes. The items of
   a mapping are used as they are.
"""

import dataclasses
import inspect
import logging
from typing import Any, Mapping

from pydantic import BaseModel

from ._utils.constants import (
    QUERY_PARAMETER_METADATA_KEY,
    QUERY_PARAMETERS_ATTRIBUTE,
)

logger = logging.getLogger(__name__)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def query_parameter(name: str, **kwargs: Any) -> Any:
    """Declares a dataclass field bound to a query parameter with another name.

    Args:
        name: The query parameter name, e.g. ``"%24select"``.
        **kwargs: Forwarded to :func:`dataclasses.field`.

    Examples:
        >>> @dataclasses.dataclass
        ... class ListUsersParameters:
        ...     select: list[str] | None = query_parameter("%24select", default=None)
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[QUERY_PARAMETER_METADATA_KEY] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _bindings(source: object) -> list[tuple[str, str]]:
    explicit = getattr(type(source), QUERY_PARAMETERS_ATTRIBUTE, None)
    if explicit is not None:
        return list(explicit.items())

    if isinstance(source, BaseModel):
        return [
            (field_name, info.serialization_alias or info.alias or field_name)
            for field_name, info in type(source).model_fields.items()
        ]

    if dataclasses.is_dataclass(source):
        return [
            (field.name, field.metadata.get(QUERY_PARAMETER_METADATA_KEY) or field.name)
            for field in dataclasses.fields(source)
            if not field.name.startswith("_")
        ]

    names: dict[str, None] = {}
    for cls in reversed(type(source).__mro__):
        names.update(dict.fromkeys(inspect.get_annotations(cls)))
        slots = cls.__dict__.get("__slots__", ())
        names.update(dict.fromkeys([slots] if isinstance(slots, str) else slots))
    names.update(dict.fromkeys(getattr(source, "__dict__", {})))
    return [(name, name) for name in names if not name.startswith("_")]


def _normalize(value: Any) -> Any:
    if isinstance(value, _SEQUENCE_TYPES):
        return list(value)
    return value


def extract_query_parameters(source: object) -> dict[str, Any]:
    """Reads the query parameters declared by an object.

    Fields whose value is ``None`` are left out and sequences are converted to
    lists. A field that cannot be read is skipped with a warning.

    Args:
        source: The object declaring the query parameters.

    Returns:
        dict[str, Any]: Query parameter values by query parameter name.
    """
    if isinstance(source, Mapping):
        return {
            str(name): _normalize(value)
            for name, value in source.items()
            if value is not None
        }

    parameters: dict[str, Any] = {}
    for attribute, name in _bindings(source):
        try:
            value = getattr(source, attribute)
        except Exception as e:
            logger.warning(
                f"Skipping query parameter '{name}': could not read "
                f"{type(source).__name__}.{attribute} ({e!r})"
            )
            continue

        if value is None:
            continue
        parameters[name] = _normalize(value)

    return parameters
