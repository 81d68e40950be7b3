"""Exceptions related to record-store."""

__all__ = [
    "RecordStoreException",
    "InputException",
    "InvalidRecordError",
    "RecordNotFoundError",
]


class RecordStoreException(Exception):
    """Generic base exception used for this library."""


class InputException(RecordStoreException):
    """Raised when the input files or documents are not formatted as expected."""


class InvalidRecordError(RecordStoreException, ValueError):
    """Raised when a record does not have a usable string identifier."""

    def __init__(self, record: object) -> None:
        super().__init__(
            f"Record {record!r} must have a string 'id' attribute"
        )
        self.record = record


class RecordNotFoundError(RecordStoreException):
    """Raised when a record is not found in the store."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Record {record_id} not found")
        self.record_id = record_id
