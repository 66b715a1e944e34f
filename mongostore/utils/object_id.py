"""
Aggregate id helpers
--------------------

Map the externally supplied aggregate id strings to MongoDB ObjectIds.
"""
from bson import ObjectId
from bson.errors import InvalidId

from mongostore.domain.errors import InvalidIdentifierError


def to_object_id(aggregate_id: str) -> ObjectId:
    """
    Convert a 24 character hex string to an ObjectId.

    Only strings are accepted; ObjectId itself also takes 12 raw bytes,
    which is not a valid aggregate id here.
    """
    if not isinstance(aggregate_id, str):
        raise InvalidIdentifierError(aggregate_id)
    try:
        return ObjectId(aggregate_id)
    except InvalidId as exc:
        raise InvalidIdentifierError(aggregate_id) from exc


def new_aggregate_id() -> str:
    """Generate a fresh aggregate id as ObjectId hex."""
    return str(ObjectId())
