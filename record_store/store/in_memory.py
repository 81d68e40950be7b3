"""Module for in memory record store."""

from collections.abc import Callable
import logging
import threading
from typing import Any, TypeVar

from record_store.exceptions import InvalidRecordError, RecordStoreException

from .observer import Channel
from .store import AfterSetEvent, BeforeSetEvent, Record, Store

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)

# Stores are only created through the StoreRegistry
_REGISTRY_KEY = object()


class InMemoryStore(Store[T]):
    """In-memory implementation of the Store interface.

    Records are kept in a dict keyed by identifier. Writes hold a re-entrant
    lock for the whole before-notify, write, after-notify sequence so that a
    listener may read from the store while it is being called.
    """

    def __init__(self, record_type: type[T], *, _key: object = None) -> None:
        """Initialize the InMemoryStore."""
        if _key is not _REGISTRY_KEY:
            raise RecordStoreException(
                f"Store for {record_type.__name__} must be obtained with get_instance()"
            )
        self._record_type = record_type
        self._records: dict[str, T] = {}
        self._lock = threading.RLock()
        self._before_set: Channel[BeforeSetEvent[T]] = Channel(
            f"{record_type.__name__}.before_set"
        )
        self._after_set: Channel[AfterSetEvent[T]] = Channel(
            f"{record_type.__name__}.after_set"
        )

    @property
    def record_type(self) -> type[T]:
        """The type of records held in this store."""
        return self._record_type

    def get(self, record_id: str) -> T | None:
        """Retrieve a record by identifier, or None if it was never written."""
        return self._records.get(record_id)

    def set(self, record: T) -> None:
        """Insert or replace the record stored under its identifier."""
        record_id = getattr(record, "id", None)
        if not isinstance(record_id, str):
            raise InvalidRecordError(record)
        with self._lock:
            value = self._records.get(record_id)
            if value is None:
                _LOGGER.debug("Adding record %s to store", record_id)
            else:
                _LOGGER.debug("Replacing record %s in store", record_id)
            self._before_set.publish(BeforeSetEvent(value=value, new_value=record))
            self._records[record_id] = record
            self._after_set.publish(AfterSetEvent(value=record))

    def on_before_set(
        self, listener: Callable[[BeforeSetEvent[T]], None]
    ) -> Callable[[], None]:
        """Register a callback called before each write."""
        return self._before_set.subscribe(listener)

    def on_after_set(
        self,
        listener: Callable[[AfterSetEvent[T]], None],
        flush: bool = False,
    ) -> Callable[[], None]:
        """Register a callback called after each write."""
        with self._lock:
            remove = self._after_set.subscribe(listener)
            if flush:
                _LOGGER.debug("Flushing %d records to listener", len(self))
                for record in self.list_records():
                    listener(AfterSetEvent(value=record))
        return remove

    def visit(self, visitor: Callable[[T], Any]) -> None:
        """Call the visitor once for every record in the store."""
        for record in self.list_records():
            visitor(record)

    def select_best(self, score: Callable[[T], float]) -> T | None:
        """Return the record with the highest positive score."""
        best: T | None = None
        max_score: float = 0
        for record in self.list_records():
            if (value := score(record)) > max_score:
                max_score = value
                best = record
        return best

    def list_records(self) -> list[T]:
        """List all records in the store."""
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        """Return the number of records in the store."""
        return len(self._records)
