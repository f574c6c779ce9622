"""
Entity persistence: turning instance state into mutation statements.
"""

from __future__ import annotations

from ..core.model import Model
from ..definition import MetadataResolver, default_resolver
from ..dialects.base import Dialect
from ..executor import Executor, UpdateResult
from ..sql import insert_sql
from ..utils import get_logger
from .faults import reclassify_faults


class EntityPersister:
    """
    Writes instances through the executor.

    The persister never touches a persistence context. Callers decide if and
    when an inserted instance becomes managed (see ``Session.persist``).
    """

    def __init__(
        self,
        executor: Executor,
        dialect: Dialect,
        *,
        resolver: MetadataResolver | None = None,
    ) -> None:
        self.executor = executor
        self.dialect = dialect
        self.resolver = resolver or default_resolver
        self.logger = get_logger("persistence.persister")

    def insert(self, instance: Model) -> UpdateResult:
        table = self.resolver.resolve(type(instance))
        sql, params = insert_sql(table, self.dialect, table.present_values(instance))
        with reclassify_faults(f"Inserting into '{table.name}'"):
            result = self.executor.update(sql, params)

        id_column = table.id_column
        if id_column.is_generated:
            # The INSERT never carries a generated identifier, so the stored
            # row's key is whatever the database assigned.
            assigned = table.identifier_of(instance)
            if assigned is not None and assigned != result.last_insert_id:
                self.logger.warning(
                    "Discarding %s.%s=%r; the database generated %r",
                    type(instance).__name__,
                    id_column.attribute,
                    assigned,
                    result.last_insert_id,
                )
            setattr(instance, id_column.attribute, result.last_insert_id)

        self.logger.debug("Inserted %s row (%d affected)", table.name, result.rowcount)
        return result
