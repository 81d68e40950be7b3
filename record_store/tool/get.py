"""Record-store get, list and best actions."""

import dataclasses
import logging
from argparse import ArgumentParser, _SubParsersAction as SubParsersAction
import pathlib
from typing import Any, cast

from record_store.exceptions import InputException, RecordNotFoundError
from record_store.records import RECORD_TYPES, BaseRecord

from . import common
from .format import formatter

_LOGGER = logging.getLogger(__name__)

NUMERIC_TYPES = (int, float)


class ListAction:
    """List all loaded records."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "list",
                aliases=["ls"],
                help="List records",
                description="Load the data files and print every record",
            ),
        )
        common.add_load_flags(args)
        common.add_output_flags(args)
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        path: pathlib.Path,
        record_type: str,
        strict: bool,
        output: str | None,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        store = await common.load_store(path, record_type, strict)
        results: list[dict[str, Any]] = []
        store.visit(lambda record: results.append(record.compact_dict()))
        if not results:
            print("No records found")
            return
        formatter(output).print(results)


class GetAction:
    """Print a single record."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "get",
                help="Get a record by id",
                description="Load the data files and print the record with the id",
            ),
        )
        common.add_load_flags(args)
        args.add_argument("id", help="Identifier of the record")
        common.add_output_flags(args)
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        path: pathlib.Path,
        record_type: str,
        strict: bool,
        id: str,  # pylint: disable=redefined-builtin
        output: str | None,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        store = await common.load_store(path, record_type, strict)
        if (record := store.get(id)) is None:
            raise RecordNotFoundError(id)
        _print_record(record, output)


class BestAction:
    """Print the record with the highest score."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "best",
                help="Get the best scoring record",
                description=(
                    "Load the data files and print the record with the highest "
                    "sum of the score fields"
                ),
            ),
        )
        common.add_load_flags(args)
        args.add_argument(
            "--score",
            "-s",
            action="append",
            required=True,
            help="Numeric field added to the score of each record",
        )
        common.add_output_flags(args)
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        path: pathlib.Path,
        record_type: str,
        strict: bool,
        score: list[str],
        output: str | None,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        field_types = {
            field.name: field.type
            for field in dataclasses.fields(RECORD_TYPES[record_type])
        }
        if unknown := [name for name in score if name not in field_types]:
            raise InputException(
                f"Unknown score fields for {record_type}: {', '.join(unknown)}"
            )
        if invalid := [name for name in score if field_types[name] not in NUMERIC_TYPES]:
            raise InputException(
                f"Score fields for {record_type} must be numeric: {', '.join(invalid)}"
            )
        store = await common.load_store(path, record_type, strict)

        def score_fn(record: BaseRecord) -> float:
            return sum(getattr(record, name) for name in score)

        if (record := store.select_best(score_fn)) is None:
            print("No record scored above 0")
            return
        _LOGGER.debug("Best record %s scored %s", record.id, score_fn(record))
        _print_record(record, output)


def _print_record(record: BaseRecord, output: str | None) -> None:
    data = record.compact_dict()
    formatter(output).print(data if output else [data])
