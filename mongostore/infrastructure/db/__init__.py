from .mongo_connection import MongoConnection
from .mongo_record_store import MongoRecordStore

__all__ = ["MongoConnection", "MongoRecordStore"]
