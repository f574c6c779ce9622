"""
Entity loading through the persistence context.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Type, TypeVar

from ..core.model import Model
from ..definition import MetadataResolver, TableDefinition, default_resolver
from ..definition.table import ColumnDefinition
from ..dialects.base import Dialect
from ..errors import NotFound, PersistenceFailure, TypeCoercion
from ..executor import Executor
from ..sql import select_by_key_sql
from ..utils import get_logger
from .faults import reclassify_faults
from .identity_map import EntityKey, PersistenceContext

TModel = TypeVar("TModel", bound=Model)

_MISSING = object()


class EntityLoader:
    """
    Loads entities by key, consulting the persistence context before storage.

    Once a key is resident in the context the loader never queries or
    materializes it again for the lifetime of that context.
    """

    def __init__(
        self,
        executor: Executor,
        context: PersistenceContext,
        dialect: Dialect,
        *,
        resolver: MetadataResolver | None = None,
    ) -> None:
        self.executor = executor
        self.context = context
        self.dialect = dialect
        self.resolver = resolver or default_resolver
        self.logger = get_logger("persistence.loader")

    def load_entity(self, model: Type[TModel], key: EntityKey) -> TModel:
        if key.entity_type is not model:
            raise TypeError(
                f"{key!r} does not identify a '{model.__name__}' entity"
            )

        managed = self.context.get_entity(key)
        if managed is not None:
            self.logger.debug("Identity map hit for %r", key)
            return managed

        table = self.resolver.resolve(model)
        sql = select_by_key_sql(table, self.dialect)
        with reclassify_faults(f"Loading {key!r}"):
            rows = self.executor.query(sql, [key.id])

        if not rows:
            raise NotFound(model, key.id)
        if len(rows) > 1:
            raise PersistenceFailure(
                f"Identifier {key.id!r} matched {len(rows)} rows in table '{table.name}'"
            )

        instance = self._materialize(table, rows[0])
        self.context.add_entity(key, instance)
        self.logger.debug("Loaded %r from storage", key)
        return instance

    def _materialize(self, table: TableDefinition, row: Mapping[str, Any]) -> Any:
        instance = table.model()
        folded: Dict[str, Any] = {name.lower(): value for name, value in row.items()}
        for column in table.columns:
            value = row.get(column.name, _MISSING)
            if value is _MISSING:
                value = folded.get(column.name.lower(), _MISSING)
            if value is _MISSING:
                raise TypeCoercion(
                    f"Row for table '{table.name}' has no value for column '{column.name}'"
                )
            self._assign(instance, table, column, value)
        return instance

    @staticmethod
    def _assign(instance: Any, table: TableDefinition, column: ColumnDefinition, value: Any) -> None:
        try:
            setattr(instance, column.attribute, value)
        except (TypeError, ValueError) as exc:
            raise TypeCoercion(
                f"Cannot load {value!r} from '{table.name}.{column.name}' "
                f"into {column.scalar_type.value} field '{column.attribute}'"
            ) from exc
