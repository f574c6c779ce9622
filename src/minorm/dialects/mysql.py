"""
MySQL dialect implementation.
"""

from __future__ import annotations

from ..core.fields import ScalarType
from .base import BaseDialect


class MySQLDialect(BaseDialect):
    """
    MySQL dialect using backtick quoting and percent-style placeholders.
    """

    name = "mysql"
    type_names = {
        ScalarType.BIG_INTEGER: "BIGINT",
        ScalarType.INTEGER: "INT",
        ScalarType.STRING: "VARCHAR({length})",
        ScalarType.FLOAT: "DOUBLE",
        ScalarType.BOOLEAN: "BOOLEAN",
    }
    identity_clause = "AUTO_INCREMENT"

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace("`", "``")
        return f"`{escaped}`"

    def format_table(self, table_name: str) -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(table)}"
        return self.quote_identifier(table_name)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "%s"

    def default_values_clause(self) -> str:
        return "() VALUES ()"
