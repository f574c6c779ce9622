"""
H2 dialect implementation.
"""

from __future__ import annotations

import re
from typing import Final

from ..core.fields import ScalarType
from .base import BaseDialect

_PLAIN_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {
        "ALL", "AND", "AS", "BETWEEN", "BY", "CHECK", "CONSTRAINT", "CREATE",
        "CROSS", "DEFAULT", "DELETE", "DISTINCT", "DROP", "EXISTS", "FALSE",
        "FOR", "FOREIGN", "FROM", "GROUP", "HAVING", "IN", "INNER", "INSERT",
        "INTERSECT", "IS", "JOIN", "KEY", "LIKE", "LIMIT", "NOT", "NULL", "ON",
        "OR", "ORDER", "PRIMARY", "SELECT", "SET", "TABLE", "TRUE", "UNION",
        "UNIQUE", "UPDATE", "USER", "VALUE", "VALUES", "WHERE", "WITH",
    }
)


class H2Dialect(BaseDialect):
    """
    H2 dialect that leaves ordinary identifiers bare.

    Identifiers are quoted only when they are reserved words or contain
    characters outside ``[A-Za-z0-9_]``.
    """

    name = "h2"
    type_names = {
        ScalarType.BIG_INTEGER: "BIGINT",
        ScalarType.INTEGER: "INT",
        ScalarType.STRING: "VARCHAR({length})",
        ScalarType.FLOAT: "DOUBLE",
        ScalarType.BOOLEAN: "BOOLEAN",
    }
    identity_clause = "AUTO_INCREMENT"

    def quote_identifier(self, identifier: str) -> str:
        if _PLAIN_IDENTIFIER.match(identifier) and identifier.upper() not in RESERVED_WORDS:
            return identifier
        return super().quote_identifier(identifier)
