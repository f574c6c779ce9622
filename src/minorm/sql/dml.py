"""
Row access statements: single-key SELECT and parameterized INSERT.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Tuple

from ..definition.table import TableDefinition
from ..dialects.base import Dialect


def select_by_key_sql(table: TableDefinition, dialect: Dialect) -> str:
    id_column = dialect.quote_identifier(table.id_column.name)
    placeholder = dialect.parameter_placeholder(1)
    return f"SELECT * FROM {dialect.format_table(table.name)} WHERE {id_column} = {placeholder};"


def insert_sql(
    table: TableDefinition, dialect: Dialect, values: Mapping[str, Any]
) -> Tuple[str, List[Any]]:
    """
    Render an INSERT for the columns present in ``values``.

    ``values`` maps column names to bind values. Columns are emitted in table
    order, and a database-generated identifier is always left out. Values are
    returned as bind parameters, never inlined.
    """
    columns: List[str] = []
    params: List[Any] = []
    for column in table.columns:
        if column.identifier and column.is_generated:
            continue
        if column.name not in values:
            continue
        columns.append(dialect.quote_identifier(column.name))
        params.append(values[column.name])

    target = dialect.format_table(table.name)
    if not columns:
        return f"INSERT INTO {target} {dialect.default_values_clause()};", params

    placeholders = ", ".join(
        dialect.parameter_placeholder(position) for position in range(1, len(columns) + 1)
    )
    return f"INSERT INTO {target} ({', '.join(columns)}) VALUES ({placeholders});", params
