"""
Table metadata: column/table definitions and the resolver that builds them.
"""

from .resolver import MetadataResolver, default_resolver, resolve_table
from .table import ColumnDefinition, TableDefinition

__all__ = [
    "ColumnDefinition",
    "MetadataResolver",
    "TableDefinition",
    "default_resolver",
    "resolve_table",
]
