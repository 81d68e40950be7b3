"""Timing and progress logs for loading records into a store."""

from contextlib import contextmanager
from dataclasses import dataclass, field
import logging
from pathlib import Path
from time import perf_counter
from typing import Generator

_LOGGER = logging.getLogger(__name__)

__all__ = ["LoadTrace", "load_trace"]


@dataclass
class LoadTrace:
    """Progress of a single load of records from a path."""

    record_type: str
    path: Path
    records: int = 0
    started: float = field(default_factory=perf_counter)

    @property
    def elapsed(self) -> float:
        """Seconds since the load started."""
        return perf_counter() - self.started

    def __str__(self) -> str:
        return f"{self.record_type} from {self.path}"


@contextmanager
def load_trace(record_type: type, path: Path) -> Generator[LoadTrace, None, None]:
    """Log the start and end of a load along with the number of records.

    The end is logged even when the load fails part way, with the records
    handled before the failure.
    """
    trace = LoadTrace(record_type=record_type.__name__, path=path)
    _LOGGER.debug("[Load] > %s", trace)
    try:
        yield trace
    finally:
        _LOGGER.debug(
            "[Load] < %s: %d records (%0.2fs)", trace, trace.records, trace.elapsed
        )
