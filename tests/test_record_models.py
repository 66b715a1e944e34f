import pytest
from bson import ObjectId
from bson.int64 import Int64
from pydantic import ValidationError

from mongostore import AggregateDocument, Record


def test_record_data_defaults_to_none():
    assert Record(version=1).data is None


def test_to_document_has_stored_shape():
    object_id = ObjectId()
    document = AggregateDocument(id=object_id, records=[Record(version=2, data=b"payload")])

    assert document.to_document() == {
        "_id": object_id,
        "records": [{"version": 2, "data": b"payload"}],
    }


def test_from_document_reads_mongo_id():
    object_id = ObjectId()

    document = AggregateDocument.from_document(
        {"_id": object_id, "records": [{"version": 1, "data": None}, {"version": 2, "data": b""}]}
    )

    assert document.id == object_id
    assert document.records == [Record(version=1), Record(version=2, data=b"")]


def test_from_document_requires_object_id():
    with pytest.raises(ValidationError):
        AggregateDocument.from_document({"_id": "not-an-object-id", "records": []})


def test_missing_records_decode_as_empty():
    assert AggregateDocument.from_document({"_id": ObjectId()}).records == []


def test_records_between_is_inclusive_and_ordered():
    document = AggregateDocument(
        id=ObjectId(),
        records=[Record(version=v) for v in (12, 1, 9, 5)],
    )

    assert [r.version for r in document.records_between(5, 12)] == [12, 9, 5]


@pytest.mark.parametrize("version", [2 ** 63, -(2 ** 63) - 1])
def test_version_must_fit_int64(version):
    with pytest.raises(ValidationError):
        Record(version=version)


def test_int64_bounds_are_accepted():
    assert Record(version=2 ** 63 - 1).version == 2 ** 63 - 1
    assert Record(version=-(2 ** 63)).version == -(2 ** 63)


def test_bson_int64_version_is_accepted():
    document = AggregateDocument.from_document({"_id": ObjectId(), "records": [{"version": Int64(7), "data": None}]})

    assert document.records == [Record(version=7)]


@pytest.mark.parametrize("version", ["12", True, 3.0])
def test_version_is_not_coerced(version):
    with pytest.raises(ValidationError):
        Record(version=version)


def test_data_is_not_coerced_from_text():
    with pytest.raises(ValidationError):
        Record(version=1, data="text")
