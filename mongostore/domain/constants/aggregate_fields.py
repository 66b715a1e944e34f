"""Constants for aggregate document field names"""


class AggregateFields:
    """Field name constants for the aggregate document"""
    RECORDS = "records"
    VERSION = "version"
    DATA = "data"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field, holds the aggregate id
