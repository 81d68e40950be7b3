"""Record loader that reads data files and feeds records to a handler.

This module provides the RecordLoader class which reads YAML or JSON data
files from the filesystem and parses every document into a record.

Key Characteristics:
- A document may hold a single record mapping or a list of record mappings
- JSON files are parsed with the same YAML parser
- Documents that can't be parsed are skipped unless configured otherwise
- Stateless apart from remembering which files were already read
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, AsyncGenerator, Generic, TypeVar

import yaml

from record_store.config import LoadOptions, ReadAction
from record_store.context import load_trace
from record_store.exceptions import InputException, RecordStoreException
from record_store.records import BaseRecord, parse_record
from record_store.store import RecordHandler

__all__ = ["RecordLoader"]

_LOGGER = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseRecord)

DATA_SUFFIXES = (".yaml", ".yml", ".json")


class RecordLoader(Generic[R]):
    """Loads records of a single type from the filesystem."""

    def __init__(self, record_type: type[R], config: ReadAction | None = None) -> None:
        """Initialize the record loader."""
        self._record_type = record_type
        self._config = config or ReadAction()
        self._processed_files: set[Path] = set()

    async def feed(self, options: LoadOptions, handler: RecordHandler[R]) -> int:
        """Load records and pass each one to the handler.

        Returns the number of records passed to the handler.
        """
        with load_trace(self._record_type, options.path) as trace:
            async for record in self.load(options):
                handler.add_record(record)
                trace.records += 1
        return trace.records

    async def load(self, options: LoadOptions) -> AsyncGenerator[R, None]:
        """Load records from the given options.

        Args:
            options: Options for loading records.
        """
        _LOGGER.info("Loading records from %s", options.path)

        if not options.path.exists():
            raise RecordStoreException(f"Path does not exist: {options.path}")

        if options.path.is_file():
            async for record in self._load_file(options.path):
                yield record
        elif options.path.is_dir():
            async for record in self._load_directory(options.path, options):
                yield record
        else:
            raise RecordStoreException(
                f"Path is not a file or directory: {options.path}"
            )

        _LOGGER.info("Finished loading records")

    async def _load_directory(
        self, path: Path, options: LoadOptions
    ) -> AsyncGenerator[R, None]:
        """Load records from a directory."""
        _LOGGER.debug("Loading directory: %s", path)

        # Entries are processed in sorted name order
        for entry in sorted(path.iterdir()):
            if entry.is_file() and entry.suffix.lower() in DATA_SUFFIXES:
                async for record in self._load_file(entry):
                    yield record
            elif options.recursive and entry.is_dir():
                async for record in self._load_directory(entry, options):
                    yield record

    async def _load_file(self, path: Path) -> AsyncGenerator[R, None]:
        """Load records from a file.

        Raises:
            RecordStoreException: If there's an error reading or parsing the file.
        """
        if path in self._processed_files:
            _LOGGER.debug("Skipping already processed file: %s", path)
            return

        _LOGGER.debug("Processing file: %s", path)
        self._processed_files.add(path)

        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as e:
            raise RecordStoreException(f"Failed to read file {path}: {e}") from e

        try:
            docs = list(yaml.safe_load_all(content))
        except yaml.YAMLError as e:
            raise RecordStoreException(f"Invalid YAML in file {path}: {e}") from e

        for doc in docs:
            if not doc:
                continue
            for item in doc if isinstance(doc, list) else [doc]:
                if (record := self._parse(item, path)) is not None:
                    yield record

    def _parse(self, doc: Any, path: Path) -> R | None:
        try:
            return parse_record(doc, self._record_type)
        except InputException as e:
            if not self._config.skip_invalid:
                raise
            _LOGGER.info("Skipping document in %s: %s", path, e)
        return None
