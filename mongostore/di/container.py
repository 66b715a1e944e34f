# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import DatabaseProvider, RepositoryProvider
from ..core.config import Settings, get_settings
from ..infrastructure.db.mongo_connection import MongoConnection


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connection (DatabaseProvider)
    2. Record store (RepositoryProvider) - depends on database
    """

    def __init__(
        self,
        connection: Optional[MongoConnection] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup(connection)

    def setup(self, connection: Optional[MongoConnection] = None) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories
        """
        DatabaseProvider.register(self, self.settings, connection)
        RepositoryProvider.register(self, self.settings)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container; closes its connection if one was opened."""
    global _container
    if _container is not None and DatabaseProvider.KEY in _container.instances:
        _container.instances[DatabaseProvider.KEY].close()
    _container = None
