from typing import TYPE_CHECKING, Optional

from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the MongoDB handle"""

    KEY = "mongo_connection"

    @staticmethod
    def register(
        container: "BaseContainer",
        settings: Settings,
        connection: Optional[MongoConnection] = None,
    ) -> None:
        """
        Register the MongoDB connection in the container.

        An injected connection is registered as is. Otherwise the connection
        is dialed from settings the first time something asks for it.
        """
        if connection is not None:
            container.register_singleton(DatabaseProvider.KEY, connection)
            return

        container.register_factory(DatabaseProvider.KEY, lambda: MongoConnection.from_settings(settings))
