"""Registry holding the single store for each record type.

Stores are created lazily the first time a record type is requested and are
kept for the lifetime of the process. Creation is guarded by double-checked
locking so concurrent first callers all get the same store.
"""

import logging
import threading
from typing import Any, TypeVar

from .in_memory import _REGISTRY_KEY, InMemoryStore
from .store import Record, Store

__all__ = ["StoreRegistry", "get_instance"]

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)


class StoreRegistry:
    """Owns one store per record type."""

    def __init__(self) -> None:
        """Initialize the StoreRegistry."""
        self._stores: dict[type[Any], Store[Any]] = {}
        self._lock = threading.Lock()

    def get_instance(self, record_type: type[T]) -> Store[T]:
        """Return the store for the record type, creating it on first use."""
        if (store := self._stores.get(record_type)) is not None:
            return store
        with self._lock:
            if (store := self._stores.get(record_type)) is None:
                _LOGGER.debug("Creating store for %s", record_type.__name__)
                store = InMemoryStore(record_type, _key=_REGISTRY_KEY)
                self._stores[record_type] = store
        return store

    def __contains__(self, record_type: type[Any]) -> bool:
        """Return True if a store was already created for the record type."""
        return record_type in self._stores


REGISTRY = StoreRegistry()


def get_instance(record_type: type[T]) -> Store[T]:
    """Return the process wide store for the record type."""
    return REGISTRY.get_instance(record_type)
