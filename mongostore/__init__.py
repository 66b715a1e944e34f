"""
mongostore
==========

Event-sourcing record store backed by MongoDB.

One document per aggregate holds the aggregate's full, ordered record
history. ``save`` replaces that history, ``load`` returns a version range
of it.
"""
from mongostore.domain.errors import (
    DecodeError,
    ExistenceCheckError,
    InvalidIdentifierError,
    LoadError,
    MongoConnectionError,
    NotFoundError,
    RecordStoreError,
    WriteError,
)
from mongostore.domain.models.record import AggregateDocument, History, Record
from mongostore.domain.repositories.record_store import RecordStore
from mongostore.infrastructure.db.mongo_connection import MongoConnection
from mongostore.infrastructure.db.mongo_record_store import MongoRecordStore
from mongostore.utils.object_id import new_aggregate_id, to_object_id

__all__ = [
    "AggregateDocument",
    "DecodeError",
    "ExistenceCheckError",
    "History",
    "InvalidIdentifierError",
    "LoadError",
    "MongoConnection",
    "MongoConnectionError",
    "MongoRecordStore",
    "NotFoundError",
    "Record",
    "RecordStore",
    "RecordStoreError",
    "WriteError",
    "new_aggregate_id",
    "to_object_id",
]
