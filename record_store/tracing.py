"""Wrapper that logs every attribute access on a record."""

import logging
from typing import Any

__all__ = ["TracedRecord"]

_LOGGER = logging.getLogger(__name__)


class TracedRecord:
    """Wraps a record and logs each attribute read and write.

    The wrapper delegates everything to the wrapped record, so it can be used
    wherever the record can, including as a value held in a store.
    """

    def __init__(self, record: Any) -> None:
        """Initialize the TracedRecord."""
        object.__setattr__(self, "_record", record)

    def __getattr__(self, name: str) -> Any:
        record = object.__getattribute__(self, "_record")
        _LOGGER.info("Tracking %s", name)
        return getattr(record, name)

    def __setattr__(self, name: str, value: Any) -> None:
        _LOGGER.info("Updating %s to %s...", name, value)
        setattr(object.__getattribute__(self, "_record"), name, value)

    def __repr__(self) -> str:
        return f"TracedRecord({object.__getattribute__(self, '_record')!r})"
