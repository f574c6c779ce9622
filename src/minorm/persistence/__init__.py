"""
Persistence layer: identity map, entity loader/persister and sessions.
"""

from .identity_map import EntityKey, PersistenceContext
from .loader import EntityLoader
from .persister import EntityPersister
from .session import Session

__all__ = ["EntityKey", "EntityLoader", "EntityPersister", "PersistenceContext", "Session"]
