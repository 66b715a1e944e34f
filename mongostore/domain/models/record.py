"""
Record Models
=============

Domain models for versioned event records and the single document that
holds one aggregate's full record history.
"""
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, StrictBytes, StrictInt, field_validator

from mongostore.domain.constants.aggregate_fields import AggregateFields


# BSON integers are signed 64-bit
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Record(BaseModel):
    """
    A single versioned event payload belonging to an aggregate.

    Both fields are strict: a stored record with a string, bool or float
    version, or a string payload, fails to decode rather than being coerced.
    """
    version: StrictInt = Field(
        ...,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Caller-assigned version, not checked for order or uniqueness",
    )
    data: Optional[StrictBytes] = Field(None, description="Opaque event payload")


# Value returned by RecordStore.load
History = List[Record]


class AggregateDocument(BaseModel):
    """
    The persisted unit of storage, one per aggregate id.

    Shape on disk: ``{_id: ObjectId, records: [{version, data}, ...]}``.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    id: ObjectId = Field(..., alias=AggregateFields.MONGO_ID, description="Aggregate id in ObjectId form")
    records: List[Record] = Field(default_factory=list, description="Records in insertion order")

    @field_validator("records", mode="before")
    @classmethod
    def null_records_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def serialized_records(self) -> List[Dict[str, Any]]:
        """Records as plain dicts, ready to be written with $set."""
        return [record.model_dump() for record in self.records]

    def to_document(self) -> Dict[str, Any]:
        """Convert to a MongoDB document."""
        return {
            AggregateFields.MONGO_ID: self.id,
            AggregateFields.RECORDS: self.serialized_records(),
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "AggregateDocument":
        """Convert a MongoDB document to an AggregateDocument."""
        return cls.model_validate(doc)

    def records_between(self, from_version: int, to_version: int) -> History:
        """Records with from_version <= version <= to_version, in stored order."""
        return [record for record in self.records if from_version <= record.version <= to_version]
