"""
minorm: a minimal object-relational persistence engine.

Models declare their columns with field descriptors, the resolver turns them
into table definitions, and sessions load and insert rows through a
per-unit-of-work identity map.
"""

from .core import (  # noqa: F401
    AutoField,
    BigIntegerField,
    BooleanField,
    FloatField,
    IntegerField,
    Model,
    StringField,
)
from .definition import ColumnDefinition, TableDefinition, resolve_table  # noqa: F401
from .dialects import get_dialect  # noqa: F401
from .errors import (  # noqa: F401
    InvalidMapping,
    NotFound,
    PersistenceError,
    PersistenceFailure,
    TypeCoercion,
    UnsupportedType,
)
from .persistence import (  # noqa: F401
    EntityKey,
    EntityLoader,
    EntityPersister,
    PersistenceContext,
    Session,
)

__all__ = [
    "AutoField",
    "BigIntegerField",
    "BooleanField",
    "ColumnDefinition",
    "EntityKey",
    "EntityLoader",
    "EntityPersister",
    "FloatField",
    "IntegerField",
    "InvalidMapping",
    "Model",
    "NotFound",
    "PersistenceContext",
    "PersistenceError",
    "PersistenceFailure",
    "Session",
    "StringField",
    "TableDefinition",
    "TypeCoercion",
    "UnsupportedType",
    "get_dialect",
    "resolve_table",
]
