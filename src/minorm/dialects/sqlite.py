"""
SQLite dialect implementation.
"""

from __future__ import annotations

from ..core.fields import ScalarType
from .base import BaseDialect


class SQLiteDialect(BaseDialect):
    """
    SQLite dialect using qmark placeholders.

    SQLite integers are 64-bit, so both integer widths map to ``INTEGER``.
    An ``INTEGER`` column named in the table's ``PRIMARY KEY`` clause is an
    alias for the rowid, which is how identity generation works here.
    """

    name = "sqlite"
    type_names = {
        ScalarType.BIG_INTEGER: "INTEGER",
        ScalarType.INTEGER: "INTEGER",
        ScalarType.STRING: "VARCHAR({length})",
        ScalarType.FLOAT: "REAL",
        ScalarType.BOOLEAN: "BOOLEAN",
    }
