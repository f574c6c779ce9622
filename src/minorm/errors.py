"""
Error taxonomy shared across minorm layers.
"""

from __future__ import annotations


class PersistenceError(Exception):
    """Base class for every error raised by the persistence core."""


class MappingError(PersistenceError):
    """Raised when model metadata cannot be turned into a table definition."""


class InvalidMapping(MappingError):
    """Raised for structural mapping problems such as a missing identifier."""


class UnsupportedType(MappingError):
    """Raised when a scalar type has no SQL counterpart."""


class NotFound(PersistenceError):
    """Raised when loading a key that has no backing row."""

    def __init__(self, model: type, key_value: object) -> None:
        self.model = model
        self.key_value = key_value
        super().__init__(f"No '{model.__name__}' row found for identifier {key_value!r}")


class TypeCoercion(PersistenceError):
    """Raised when a stored value cannot populate its target field."""


class PersistenceFailure(PersistenceError):
    """Raised when the statement executor reports a fault."""
