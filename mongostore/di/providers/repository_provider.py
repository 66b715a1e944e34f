from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.record_store import RecordStore
from ...infrastructure.db.mongo_record_store import MongoRecordStore
from .database_provider import DatabaseProvider

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register the record store implementation.
        Gets the connection from the database provider when the store is first requested.
        """
        # Domain interface -> Infrastructure implementation
        container.register_factory(
            RecordStore,
            lambda: MongoRecordStore(
                settings.mongodb_collection,
                settings.mongodb_database,
                container.get(DatabaseProvider.KEY),
                atomic_upsert=settings.mongodb_atomic_upsert,
            ),
        )
