from .record import AggregateDocument, History, Record

__all__ = ["AggregateDocument", "History", "Record"]
