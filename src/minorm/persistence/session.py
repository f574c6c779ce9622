"""
Session coordinating one unit of work over an adapter.
"""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from ..adapters.base import ConnectionConfig, DatabaseAdapter
from ..core.model import Model
from ..definition import MetadataResolver, default_resolver
from ..dialects.base import Dialect
from ..executor import StatementExecutor
from ..sql import create_table_sql, drop_table_sql
from ..utils import get_logger
from .faults import reclassify_faults
from .identity_map import EntityKey, PersistenceContext
from .loader import EntityLoader
from .persister import EntityPersister

TModel = TypeVar("TModel", bound=Model)


class Session:
    """
    Owns the persistence context, loader and persister for one unit of work.

    Create one session per logical operation sequence and close it when the
    sequence ends; closing discards every managed instance.
    """

    def __init__(
        self,
        adapter: DatabaseAdapter,
        *,
        connection_config: Optional[ConnectionConfig] = None,
        dialect: Optional[Dialect] = None,
        resolver: Optional[MetadataResolver] = None,
    ) -> None:
        self.adapter = adapter
        self.dialect: Dialect = dialect or adapter.dialect
        self.resolver = resolver or default_resolver
        self.connection_config = connection_config or ConnectionConfig(url="sqlite:///:memory:")
        self.logger = get_logger("persistence.session")

        self.context = PersistenceContext()
        self.executor = StatementExecutor(adapter)
        self.loader = EntityLoader(self.executor, self.context, self.dialect, resolver=self.resolver)
        self.persister = EntityPersister(self.executor, self.dialect, resolver=self.resolver)
        self.adapter.connect(self.connection_config)

    # ------------------------------------------------------------------ #
    # Context management
    # ------------------------------------------------------------------ #
    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.context.clear()
        self.adapter.close()

    # ------------------------------------------------------------------ #
    # Schema
    # ------------------------------------------------------------------ #
    def create_table(self, model: type[Model]) -> None:
        sql = create_table_sql(self.resolver.resolve(model), self.dialect)
        with reclassify_faults(f"Creating table for {model.__name__}"):
            self.executor.execute(sql)

    def drop_table(self, model: type[Model]) -> None:
        table = self.resolver.resolve(model)
        self.logger.warning("Dropping table %s; its rows are discarded.", table.name)
        with reclassify_faults(f"Dropping table for {model.__name__}"):
            self.executor.execute(drop_table_sql(table, self.dialect))

    # ------------------------------------------------------------------ #
    # Entities
    # ------------------------------------------------------------------ #
    def key_for(self, instance: Model) -> EntityKey:
        table = self.resolver.resolve(type(instance))
        return EntityKey(table.identifier_of(instance), type(instance))

    def find(self, model: Type[TModel], identifier: Any) -> TModel:
        return self.loader.load_entity(model, EntityKey(identifier, model))

    def persist(self, instance: Model) -> None:
        """
        Insert ``instance`` and make it the managed instance for its key.

        Registration happens here rather than in the persister. An instance
        whose identifier is still unknown after the insert is not registered.
        """
        self.persister.insert(instance)
        key = self.key_for(instance)
        if key.id is None:
            self.logger.debug("Inserted %r without a known identifier; not registered", instance)
            return
        self.context.add_entity(key, instance)

    def contains(self, instance: Model) -> bool:
        key = self.key_for(instance)
        return self.context.get_entity(key) is instance
