"""Shared flags and helpers for record-store actions."""

from argparse import ArgumentParser
import logging
import pathlib

from record_store.config import LoadOptions, ReadAction
from record_store.exceptions import RecordStoreException
from record_store.loader import RecordLoader
from record_store.records import RECORD_TYPES, BaseRecord
from record_store.store import AfterSetEvent, Store, StoreAdapter, registry

_LOGGER = logging.getLogger(__name__)

DEFAULT_RECORD_TYPE = "pokemon"


def add_load_flags(args: ArgumentParser) -> None:
    """Add flags common to every action that loads a data file."""
    args.add_argument(
        "path",
        type=pathlib.Path,
        help="Data file or directory of YAML/JSON data files to load",
    )
    args.add_argument(
        "--record-type",
        choices=sorted(RECORD_TYPES),
        default=DEFAULT_RECORD_TYPE,
        help="Type of the records in the data files",
    )
    args.add_argument(
        "--strict",
        action="store_true",
        help="Fail on documents that can't be parsed instead of skipping them",
    )


def add_output_flags(args: ArgumentParser) -> None:
    """Add the output format flag."""
    args.add_argument(
        "--output",
        "-o",
        choices=["yaml", "json"],
        default=None,
        help="Output format of the command",
    )


def _log_added(event: AfterSetEvent[BaseRecord]) -> None:
    _LOGGER.info("Added: %s", event.value.id)


async def load_store(
    path: pathlib.Path, record_type: str, strict: bool = False
) -> Store[BaseRecord]:
    """Load the data files into the store for the record type."""
    if (cls := RECORD_TYPES.get(record_type)) is None:
        raise RecordStoreException(f"Unknown record type: {record_type}")
    store = registry.get_instance(cls)
    remove = store.on_after_set(_log_added)
    try:
        loader = RecordLoader(cls, ReadAction(skip_invalid=not strict))
        count = await loader.feed(LoadOptions(path), StoreAdapter(cls))
    finally:
        remove()
    _LOGGER.debug("Loaded %d records, store has %d", count, len(store))
    return store
