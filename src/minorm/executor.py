"""
Statement executor bridging generated SQL and a database adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Sequence

from .adapters.base import DatabaseAdapter


@dataclass(frozen=True)
class UpdateResult:
    rowcount: int
    last_insert_id: Any = None


class Executor(Protocol):
    """
    What the loader and persister need from the database.

    Implementations raise :class:`minorm.adapters.AdapterError` subclasses on
    database faults.
    """

    def execute(self, sql: str) -> None: ...

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]: ...

    def update(self, sql: str, params: Sequence[Any] = ()) -> UpdateResult: ...


class StatementExecutor:
    """
    :class:`Executor` implementation running statements through an adapter.

    Timing, parameter redaction and the slow-query threshold belong to the
    adapter, which logs each statement once.
    """

    def __init__(self, adapter: DatabaseAdapter) -> None:
        self.adapter = adapter

    def execute(self, sql: str) -> None:
        self.adapter.execute(sql)

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        cursor = self.adapter.execute(sql, list(params))
        rows = cursor.fetchall()
        if not rows:
            return []
        columns = [description[0] for description in cursor.description]
        return [dict(zip(columns, row)) for row in rows]

    def update(self, sql: str, params: Sequence[Any] = ()) -> UpdateResult:
        cursor = self.adapter.execute(sql, list(params))
        # lastrowid is an optional DB-API extension.
        return UpdateResult(
            rowcount=cursor.rowcount, last_insert_id=getattr(cursor, "lastrowid", None)
        )
