"""
Identity map guaranteeing a single in-memory instance per entity key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional


@dataclass(frozen=True)
class EntityKey:
    """
    Identifier value paired with the entity type it belongs to.
    """

    id: Any
    entity_type: type

    def __repr__(self) -> str:
        return f"EntityKey({self.id!r}, {self.entity_type.__name__})"


class PersistenceContext:
    """
    Maps entity keys to the instances managed by one unit of work.

    A context is owned by a single unit of work and is not safe to share
    between concurrently running operations. There is no per-entry eviction:
    the whole map is dropped with :meth:`clear` when the unit of work ends.
    """

    def __init__(self) -> None:
        self._entities: Dict[EntityKey, Any] = {}

    def add_entity(self, key: EntityKey, instance: Any) -> None:
        """Register ``instance`` under ``key``, replacing any previous instance."""
        self._entities[key] = instance

    def get_entity(self, key: EntityKey) -> Optional[Any]:
        return self._entities.get(key)

    def contains(self, key: EntityKey) -> bool:
        return key in self._entities

    def clear(self) -> None:
        self._entities.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[EntityKey]:
        return iter(list(self._entities))
