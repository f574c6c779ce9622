"""
Reclassification of adapter faults into the persistence error taxonomy.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from ..adapters.base import AdapterError
from ..errors import PersistenceFailure


@contextmanager
def reclassify_faults(operation: str) -> Iterator[None]:
    try:
        yield
    except AdapterError as exc:
        raise PersistenceFailure(f"{operation} failed: {exc}") from exc
