from ._errors import serialization_errors

__all__ = ["serialization_errors"]
