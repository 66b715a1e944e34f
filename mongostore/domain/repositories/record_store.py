"""
Record Store Interface
======================

Abstract interface for per-aggregate record persistence.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from mongostore.domain.models.record import History, Record


class RecordStore(ABC):
    """
    Abstract store for aggregate record histories.

    Every aggregate id maps to exactly one stored record sequence.
    ``timeout`` is an optional deadline in seconds covering every
    round trip of the call.
    """

    @abstractmethod
    def save(
        self,
        aggregate_id: str,
        records: Sequence[Record] = (),
        timeout: Optional[float] = None,
    ) -> None:
        """
        Store ``records`` as the complete history of the aggregate.

        The first save creates the aggregate document; later saves replace
        its records in full, they never append. Callers that want to add
        records must pass the previously loaded history plus the new ones.

        Args:
            aggregate_id: 24 character ObjectId hex string
            records: Full record sequence to store, may be empty
            timeout: Optional deadline in seconds

        Raises:
            InvalidIdentifierError: aggregate_id is not ObjectId hex
            ExistenceCheckError: the existence probe failed
            WriteError: the insert, update or upsert failed
        """
        pass

    @abstractmethod
    def load(
        self,
        aggregate_id: str,
        from_version: int,
        to_version: int,
        timeout: Optional[float] = None,
    ) -> History:
        """
        Load the records whose version lies in [from_version, to_version].

        Returns:
            Matching records in stored order, possibly empty

        Raises:
            InvalidIdentifierError: aggregate_id is not ObjectId hex
            NotFoundError: no document exists for aggregate_id
            LoadError: fetching the document failed
            DecodeError: the stored document could not be decoded
        """
        pass
