"""
Shared fixtures
---------------

In-memory stand-ins for the MongoDB connection and collection. The fake
collection implements only the calls MongoRecordStore makes and copies
documents in and out, the way a round trip through the server would.
"""
import copy
from typing import Any, Dict, List, Optional, Tuple

import pytest
from pymongo import _csot
from pymongo.errors import DuplicateKeyError

from mongostore.infrastructure.db.mongo_record_store import MongoRecordStore


class FakeCollection:
    """Dict backed collection keyed by _id, with a log of calls and optional failures."""

    def __init__(self) -> None:
        self.documents: Dict[Any, Dict[str, Any]] = {}
        self.calls: List[Tuple[str, Any]] = []
        # remaining client side deadline (seconds) seen by each call, None when unbounded
        self.deadlines: List[Tuple[str, Optional[float]]] = []
        self.failures: Dict[str, Exception] = {}

    def _record_call(self, name: str, payload: Any) -> None:
        self.calls.append((name, copy.deepcopy(payload)))
        self.deadlines.append((name, _csot.get_timeout()))
        if name in self.failures:
            raise self.failures[name]

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def count_documents(self, filter: Dict[str, Any], limit: int = 0) -> int:
        self._record_call("count_documents", filter)
        return 1 if filter["_id"] in self.documents else 0

    def insert_one(self, document: Dict[str, Any]) -> None:
        self._record_call("insert_one", document)
        if document["_id"] in self.documents:
            raise DuplicateKeyError("E11000 duplicate key error")
        self.documents[document["_id"]] = copy.deepcopy(document)

    def update_one(self, filter: Dict[str, Any], update: Dict[str, Any], upsert: bool = False) -> None:
        self._record_call("update_one", {"filter": filter, "update": update, "upsert": upsert})
        key = filter["_id"]
        if key not in self.documents:
            if not upsert:
                return
            self.documents[key] = {"_id": key}
        self.documents[key].update(copy.deepcopy(update["$set"]))

    def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._record_call("find_one", filter)
        doc = self.documents.get(filter["_id"])
        return copy.deepcopy(doc) if doc is not None else None


class FakeConnection:
    """Resolves every (database, collection) pair to its own FakeCollection."""

    def __init__(self) -> None:
        self.collections: Dict[Tuple[str, str], FakeCollection] = {}
        self.closed = False

    def collection(self, database_name: str, collection_name: str) -> FakeCollection:
        return self.collections.setdefault((database_name, collection_name), FakeCollection())

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def collection(connection: FakeConnection) -> FakeCollection:
    return connection.collection("test_database", "test_collection")


@pytest.fixture
def store(connection: FakeConnection) -> MongoRecordStore:
    return MongoRecordStore("test_collection", "test_database", connection)


@pytest.fixture
def upsert_store(connection: FakeConnection) -> MongoRecordStore:
    return MongoRecordStore("test_collection", "test_database", connection, atomic_upsert=True)
