"""
Resolution of declared model metadata into table definitions.
"""

from __future__ import annotations

from threading import RLock
from typing import Dict

from ..core.fields import DEFAULT_STRING_LENGTH, Field, ScalarType
from ..core.model import Model
from ..errors import InvalidMapping, UnsupportedType
from ..utils import camel_to_snake, get_logger
from .table import ColumnDefinition, TableDefinition

_INTEGER_TYPES = frozenset({ScalarType.BIG_INTEGER, ScalarType.INTEGER})


class MetadataResolver:
    """
    Builds and caches one :class:`TableDefinition` per model type.

    The cache is guarded by a lock because definitions are shared across
    sessions that may run on different threads.
    """

    def __init__(self) -> None:
        self._cache: Dict[type, TableDefinition] = {}
        self._lock = RLock()
        self.logger = get_logger("definition.resolver")

    def resolve(self, model: type) -> TableDefinition:
        with self._lock:
            cached = self._cache.get(model)
            if cached is not None:
                return cached
            definition = self._build(model)
            self._cache[model] = definition
        self.logger.debug(
            "Resolved %s to table '%s' with %d columns",
            model.__name__,
            definition.name,
            len(definition.columns),
        )
        return definition

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    # ------------------------------------------------------------------ #
    def _build(self, model: type) -> TableDefinition:
        if not (isinstance(model, type) and issubclass(model, Model) and model is not Model):
            raise InvalidMapping(f"{model!r} is not a mapped model class")

        options = model._meta
        identifiers = options.primary_keys
        if len(identifiers) != 1:
            raise InvalidMapping(
                f"Model '{model.__name__}' must declare exactly one identifier field, "
                f"found {len(identifiers)}"
            )

        columns = tuple(self._column_for(model, field_obj) for field_obj in options.get_fields())
        seen: set[str] = set()
        for column in columns:
            if column.name in seen:
                raise InvalidMapping(
                    f"Model '{model.__name__}' maps more than one field to column '{column.name}'"
                )
            seen.add(column.name)

        table_name = options.table_override or camel_to_snake(model.__name__)
        return TableDefinition(model=model, name=table_name, columns=columns)

    @staticmethod
    def _column_for(model: type, field_obj: Field) -> ColumnDefinition:
        name = field_obj.require_name()
        scalar_type = field_obj.scalar_type
        if not isinstance(scalar_type, ScalarType):
            raise UnsupportedType(
                f"Field '{model.__name__}.{name}' ({type(field_obj).__name__}) "
                "has no supported scalar type"
            )

        if field_obj.generation is not None:
            if not field_obj.primary_key:
                raise InvalidMapping(
                    f"Field '{model.__name__}.{name}' declares a generation strategy "
                    "but is not the identifier"
                )
            if scalar_type not in _INTEGER_TYPES:
                raise InvalidMapping(
                    f"Generated identifier '{model.__name__}.{name}' must be an integer field"
                )

        length = None
        if scalar_type is ScalarType.STRING:
            length = field_obj.length or DEFAULT_STRING_LENGTH

        return ColumnDefinition(
            name=field_obj.column_name(),
            attribute=name,
            scalar_type=scalar_type,
            nullable=field_obj.nullable,
            length=length,
            identifier=field_obj.primary_key,
            generation=field_obj.generation,
        )


default_resolver = MetadataResolver()


def resolve_table(model: type) -> TableDefinition:
    """Resolve ``model`` through the process-wide definition cache."""
    return default_resolver.resolve(model)
