"""
MongoDB Record Store
====================

Concrete implementation of RecordStore using MongoDB.

Each aggregate is one document ``{_id: ObjectId, records: [...]}``. Saving
replaces the stored records in full; loading fetches the whole document
and filters by version on the client.

Known limitation: in the default two-phase mode, save probes for the
document and then inserts or updates it. Two concurrent saves for the
same new aggregate id can both see "absent" and one insert then fails
with a duplicate key error. ``atomic_upsert=True`` writes in a single
upsert instead. Either way a save transmits the full history, which
suits aggregates with modest record counts.
"""
from contextlib import nullcontext
from typing import TYPE_CHECKING, Any, ContextManager, Dict, Optional, Sequence
import logging

import pymongo
from bson import ObjectId
from bson.errors import BSONError
from pydantic import ValidationError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from mongostore.domain.constants.aggregate_fields import AggregateFields
from mongostore.domain.errors import (
    DecodeError,
    ExistenceCheckError,
    LoadError,
    NotFoundError,
    WriteError,
)
from mongostore.domain.models.record import AggregateDocument, History, Record
from mongostore.domain.repositories.record_store import RecordStore
from mongostore.utils.object_id import to_object_id

if TYPE_CHECKING:
    from mongostore.infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)

# Encoding failures (int overflow, unencodable values) are not PyMongoErrors
_WRITE_ERRORS = (PyMongoError, BSONError, OverflowError)


def _deadline(timeout: Optional[float]) -> ContextManager[Any]:
    """Apply a pymongo client side deadline to every operation in the block."""
    if timeout is None:
        return nullcontext()
    return pymongo.timeout(timeout)


class MongoRecordStore(RecordStore):
    """MongoDB implementation of RecordStore."""

    def __init__(
        self,
        collection_name: str,
        database_name: str,
        connection: "MongoConnection",
        atomic_upsert: bool = False,
    ):
        self._collection_name = collection_name
        self._database_name = database_name
        self._connection = connection
        self._atomic_upsert = atomic_upsert

    @property
    def _collection(self) -> Collection:
        return self._connection.collection(self._database_name, self._collection_name)

    def save(
        self,
        aggregate_id: str,
        records: Sequence[Record] = (),
        timeout: Optional[float] = None,
    ) -> None:
        """Store records as the full history of the aggregate."""
        object_id = to_object_id(aggregate_id)
        document = AggregateDocument(id=object_id, records=list(records))
        collection = self._collection

        with _deadline(timeout):
            if self._atomic_upsert:
                self._upsert(collection, aggregate_id, document)
            elif self._contains_document(collection, aggregate_id, object_id):
                self._update(collection, aggregate_id, document)
            else:
                self._insert(collection, aggregate_id, document)

        logger.debug(f"Saved {len(document.records)} records for aggregate {aggregate_id}")

    def load(
        self,
        aggregate_id: str,
        from_version: int,
        to_version: int,
        timeout: Optional[float] = None,
    ) -> History:
        """Load the records of an aggregate with from_version <= version <= to_version."""
        object_id = to_object_id(aggregate_id)

        try:
            with _deadline(timeout):
                doc = self._collection.find_one(self._id_filter(object_id))
        except PyMongoError as exc:
            logger.error(f"Failed to fetch aggregate {aggregate_id}: {exc}")
            raise LoadError(aggregate_id) from exc

        if doc is None:
            raise NotFoundError(aggregate_id)

        try:
            document = AggregateDocument.from_document(doc)
        except ValidationError as exc:
            logger.error(f"Failed to decode aggregate {aggregate_id}: {exc}")
            raise DecodeError(aggregate_id) from exc

        history = document.records_between(from_version, to_version)
        logger.debug(
            f"Loaded {len(history)} of {len(document.records)} records for aggregate "
            f"{aggregate_id} (versions {from_version}..{to_version})"
        )
        return history

    @staticmethod
    def _id_filter(object_id: ObjectId) -> Dict[str, Any]:
        return {AggregateFields.MONGO_ID: object_id}

    def _contains_document(self, collection: Collection, aggregate_id: str, object_id: ObjectId) -> bool:
        """Check if a document exists for the aggregate."""
        try:
            count = collection.count_documents(self._id_filter(object_id), limit=1)
        except PyMongoError as exc:
            logger.error(f"Failed to test for aggregate {aggregate_id}: {exc}")
            raise ExistenceCheckError(aggregate_id) from exc
        return count > 0

    def _insert(self, collection: Collection, aggregate_id: str, document: AggregateDocument) -> None:
        try:
            collection.insert_one(document.to_document())
        except _WRITE_ERRORS as exc:
            logger.error(f"Failed to insert aggregate {aggregate_id}: {exc}")
            raise WriteError(aggregate_id, "insert") from exc

    def _update(self, collection: Collection, aggregate_id: str, document: AggregateDocument) -> None:
        """Replace the stored records in full."""
        try:
            collection.update_one(
                self._id_filter(document.id),
                {"$set": {AggregateFields.RECORDS: document.serialized_records()}},
            )
        except _WRITE_ERRORS as exc:
            logger.error(f"Failed to update aggregate {aggregate_id}: {exc}")
            raise WriteError(aggregate_id, "update") from exc

    def _upsert(self, collection: Collection, aggregate_id: str, document: AggregateDocument) -> None:
        try:
            collection.update_one(
                self._id_filter(document.id),
                {"$set": {AggregateFields.RECORDS: document.serialized_records()}},
                upsert=True,
            )
        except _WRITE_ERRORS as exc:
            logger.error(f"Failed to upsert aggregate {aggregate_id}: {exc}")
            raise WriteError(aggregate_id, "upsert") from exc
