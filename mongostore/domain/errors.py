"""
Record Store Errors
===================

Failures raised by record stores and the connection provider.
Transport errors are never swallowed: they are wrapped in one of these
types (with the original chained as ``__cause__``) and re-raised.
"""
from typing import Optional


class RecordStoreError(Exception):
    """Base class for all record store failures."""

    def __init__(self, message: str, aggregate_id: Optional[str] = None):
        super().__init__(message)
        self.aggregate_id = aggregate_id


class InvalidIdentifierError(RecordStoreError, ValueError):
    """The aggregate id is not a valid ObjectId hex string."""

    def __init__(self, aggregate_id):
        super().__init__(
            f"could not create objectID from provided hex {aggregate_id!r}",
            aggregate_id=aggregate_id,
        )


class NotFoundError(RecordStoreError, LookupError):
    """No document exists for the aggregate id."""

    def __init__(self, aggregate_id: str):
        super().__init__(f"no aggregate found with id {aggregate_id}", aggregate_id=aggregate_id)


class ExistenceCheckError(RecordStoreError):
    """Probing for an existing aggregate document failed."""

    def __init__(self, aggregate_id: str):
        super().__init__(
            f"could not test for existing document with id {aggregate_id}",
            aggregate_id=aggregate_id,
        )


class WriteError(RecordStoreError):
    """Inserting, updating or upserting the aggregate document failed."""

    def __init__(self, aggregate_id: str, operation: str):
        super().__init__(
            f"could not {operation} aggregate with id {aggregate_id}",
            aggregate_id=aggregate_id,
        )
        self.operation = operation


class LoadError(RecordStoreError):
    """Fetching the aggregate document failed."""

    def __init__(self, aggregate_id: str):
        super().__init__(f"could not fetch aggregate with id {aggregate_id}", aggregate_id=aggregate_id)


class DecodeError(RecordStoreError):
    """The stored document could not be decoded into records."""

    def __init__(self, aggregate_id: str):
        super().__init__(
            f"could not decode record history of aggregate {aggregate_id}",
            aggregate_id=aggregate_id,
        )


class MongoConnectionError(RecordStoreError):
    """Connecting to, authenticating against or pinging MongoDB failed."""

    def __init__(self, message: str):
        super().__init__(message)
