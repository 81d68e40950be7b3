"""Record types that can be held in a record store.

A record is any value with a unique string `id` attribute. The store never
looks at any other field, except through a caller supplied scoring function.
The dataclasses here add parsing and serialization on top of that contract.
"""

from dataclasses import dataclass, field
import logging
from typing import Any, TypeVar

from mashumaro import DataClassDictMixin, field_options
from mashumaro.config import BaseConfig
from mashumaro.exceptions import MissingField, InvalidFieldValue

from .exceptions import InputException

__all__ = [
    "BaseRecord",
    "Pokemon",
    "RECORD_TYPES",
    "parse_record",
]

_LOGGER = logging.getLogger(__name__)

R = TypeVar("R", bound="BaseRecord")


@dataclass
class BaseRecord(DataClassDictMixin):
    """Base class for all records."""

    id: str
    """The unique identifier of the record."""

    def compact_dict(self) -> dict[str, Any]:
        """Return a compact dictionary representation of the record."""
        return self.to_dict()

    class Config(BaseConfig):
        omit_none = True


@dataclass
class Pokemon(BaseRecord):
    """A pokemon with its battle statistics."""

    attack: int = field(default=0, metadata=field_options(deserialize=int))
    """Attack points."""

    defense: int = field(default=0, metadata=field_options(deserialize=int))
    """Defense points."""


RECORD_TYPES: dict[str, type[BaseRecord]] = {
    "pokemon": Pokemon,
}


def parse_record(doc: Any, record_type: type[R]) -> R:
    """Parse a record of the given type from a raw document."""
    if not isinstance(doc, dict):
        raise InputException(f"Invalid record, expected a mapping: {doc}")
    if not isinstance(doc.get("id"), str) or not doc["id"]:
        raise InputException(f"Invalid record missing id: {doc}")
    try:
        return record_type.from_dict(doc)
    except (MissingField, InvalidFieldValue, TypeError, ValueError) as err:
        raise InputException(f"Invalid {record_type.__name__} {doc}: {err}") from err
