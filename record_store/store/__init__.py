"""
The store module provides a keyed, in-process repository of records.

- Uses the record `id` as the key for all records.
- Provides lookup, upsert, traversal and best-match queries.
- Publishes events before and after each write so observers can react to
  changes without the store knowing about them.
- Keeps exactly one store per record type, obtained from a registry.
"""

from .adapter import RecordHandler, StoreAdapter
from .in_memory import InMemoryStore
from .observer import Channel
from .registry import StoreRegistry, get_instance
from .store import AfterSetEvent, BeforeSetEvent, Record, Store

__all__ = [
    "AfterSetEvent",
    "BeforeSetEvent",
    "Channel",
    "InMemoryStore",
    "Record",
    "RecordHandler",
    "Store",
    "StoreAdapter",
    "StoreRegistry",
    "get_instance",
]
