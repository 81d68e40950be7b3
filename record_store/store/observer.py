"""Publish/subscribe channel used for store lifecycle notifications."""

from collections.abc import Callable
import logging
import threading
from typing import Generic, TypeVar

_LOGGER = logging.getLogger(__name__)

__all__ = ["Channel", "Listener"]

E = TypeVar("E")

Listener = Callable[[E], None]


class Channel(Generic[E]):
    """A set of listeners that are all called with each published event.

    Membership is by identity of the listener object, so registering the same
    object twice has no effect while equal but distinct callables (including
    two bound methods fetched separately) are separate listeners.
    Listeners are called synchronously in subscription order.

    Publishing iterates over a snapshot of the listeners: a listener added
    during a publish is first called by the next publish, and a listener
    removed during a publish is still called by the current one if it had not
    run yet.
    """

    def __init__(self, name: str = "channel") -> None:
        """Initialize the Channel."""
        self._name = name
        self._listeners: dict[int, Listener[E]] = {}
        self._lock = threading.Lock()

    def subscribe(self, listener: Listener[E]) -> Callable[[], None]:
        """Register a listener for published events.

        Returns a callable that removes the listener. Calling it more than once
        has no further effect.
        """

        def remove() -> None:
            with self._lock:
                if self._listeners.get(key) is listener:
                    del self._listeners[key]
                    _LOGGER.debug("Removed listener %s from %s", listener, self._name)

        key = id(listener)
        with self._lock:
            self._listeners.setdefault(key, listener)
        _LOGGER.debug("Added listener %s to %s", listener, self._name)
        return remove

    def publish(self, event: E) -> None:
        """Call every registered listener with the event.

        Errors raised by a listener propagate to the caller and the remaining
        listeners are not called.
        """
        with self._lock:
            listeners = list(self._listeners.values())
        for listener in listeners:
            listener(event)

    def __len__(self) -> int:
        """Return the number of registered listeners."""
        with self._lock:
            return len(self._listeners)

