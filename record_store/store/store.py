"""Store module for holding records keyed by their identifier."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar


class Record(Protocol):
    """Any value with a string identifier can be held in a store."""

    @property
    def id(self) -> str:
        """The unique identifier of the record."""


T = TypeVar("T", bound=Record)


@dataclass(frozen=True)
class BeforeSetEvent(Generic[T]):
    """Event published before a record is written to the store."""

    value: T | None
    """The record currently stored under the identifier, if any."""

    new_value: T
    """The record about to be written."""


@dataclass(frozen=True)
class AfterSetEvent(Generic[T]):
    """Event published after a record was written to the store."""

    value: T
    """The record now stored under the identifier."""


class Store(ABC, Generic[T]):
    """Abstract base class for a keyed record store with listener support."""

    @abstractmethod
    def get(self, record_id: str) -> T | None:
        """Retrieve a record by identifier, or None if it was never written."""

    @abstractmethod
    def set(self, record: T) -> None:
        """Insert or replace the record stored under its identifier.

        Listeners registered with `on_before_set` are called before the write
        and listeners registered with `on_after_set` are called after it.
        """

    @abstractmethod
    def on_before_set(
        self, listener: Callable[[BeforeSetEvent[T]], None]
    ) -> Callable[[], None]:
        """Register a callback called before each write.

        Returns a callable that can be called to remove the listener.
        """

    @abstractmethod
    def on_after_set(
        self,
        listener: Callable[[AfterSetEvent[T]], None],
        flush: bool = False,
    ) -> Callable[[], None]:
        """Register a callback called after each write.

        When `flush` is set the listener is called right away for every record
        already in the store.

        Returns a callable that can be called to remove the listener.
        """

    @abstractmethod
    def visit(self, visitor: Callable[[T], Any]) -> None:
        """Call the visitor once for every record in the store."""

    @abstractmethod
    def select_best(self, score: Callable[[T], float]) -> T | None:
        """Return the record with the highest positive score.

        Ties are won by the record visited first. Records scoring zero or less
        are never returned, so None is returned when no record scores above
        zero or the store is empty.
        """

    @abstractmethod
    def list_records(self) -> list[T]:
        """List all records in the store."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of records in the store."""
