"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from ..core.fields import ScalarType
from .base import BaseDialect


class PostgresDialect(BaseDialect):
    """
    PostgreSQL dialect using pyformat placeholders and identity columns.
    """

    name = "postgresql"
    type_names = {
        ScalarType.BIG_INTEGER: "BIGINT",
        ScalarType.INTEGER: "INTEGER",
        ScalarType.STRING: "VARCHAR({length})",
        ScalarType.FLOAT: "DOUBLE PRECISION",
        ScalarType.BOOLEAN: "BOOLEAN",
    }
    identity_clause = "GENERATED BY DEFAULT AS IDENTITY"

    def format_table(self, table_name: str) -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(table)}"
        return self.quote_identifier(table_name)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "%s"
