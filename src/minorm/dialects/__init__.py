"""
Dialect strategy registry.
"""

from __future__ import annotations

from typing import Dict

from .base import BaseDialect, Dialect
from .h2 import H2Dialect
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

# Dialects are stateless, so one shared instance per database is enough.
_REGISTRY: Dict[str, Dialect] = {
    "h2": H2Dialect(),
    "sqlite": SQLiteDialect(),
    "postgresql": PostgresDialect(),
    "mysql": MySQLDialect(),
}
_ALIASES = {"postgres": "postgresql", "sqlite3": "sqlite", "mariadb": "mysql"}


def get_dialect(name: str) -> Dialect:
    """Return the shared dialect for a database name such as ``"sqlite"``."""
    key = name.lower()
    key = _ALIASES.get(key, key)
    try:
        return _REGISTRY[key]
    except KeyError as exc:
        known = ", ".join(sorted(_REGISTRY))
        raise ValueError(f"Unknown dialect '{name}'. Known dialects: {known}") from exc


__all__ = [
    "BaseDialect",
    "Dialect",
    "H2Dialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "get_dialect",
]
