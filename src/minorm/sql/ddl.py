"""
Table lifecycle statements rendered from a table definition.

These builders are pure: identical inputs always yield identical text and
nothing is executed.
"""

from __future__ import annotations

from ..definition.table import TableDefinition
from ..dialects.base import Dialect


def create_table_sql(table: TableDefinition, dialect: Dialect) -> str:
    clauses = [dialect.render_column_definition(column) for column in table.columns]
    clauses.append(f"PRIMARY KEY ({dialect.quote_identifier(table.id_column.name)})")
    return f"CREATE TABLE {dialect.format_table(table.name)} ({', '.join(clauses)});"


def drop_table_sql(table: TableDefinition, dialect: Dialect) -> str:
    return f"DROP TABLE {dialect.format_table(table.name)};"
