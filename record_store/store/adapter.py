"""Adapter that lets a record loader write into a store."""

from abc import ABC, abstractmethod
import logging
from typing import Generic, TypeVar

from .registry import REGISTRY, StoreRegistry
from .store import Record

__all__ = ["RecordHandler", "StoreAdapter"]

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)


class RecordHandler(ABC, Generic[T]):
    """Receives records from a loader one at a time."""

    @abstractmethod
    def add_record(self, record: T) -> None:
        """Accept one loaded record."""


class StoreAdapter(RecordHandler[T]):
    """Writes every record it receives to the registry's store for a type."""

    def __init__(
        self, record_type: type[T], registry: StoreRegistry | None = None
    ) -> None:
        """Initialize the StoreAdapter."""
        self._record_type = record_type
        self._registry = registry or REGISTRY

    def add_record(self, record: T) -> None:
        """Write the record to the store."""
        _LOGGER.debug("Adding record %s from loader", record.id)
        self._registry.get_instance(self._record_type).set(record)
