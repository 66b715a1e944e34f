"""
MongoDB Connection
==================

Authenticated MongoDB client handle shared by record stores.

The handle is created once (usually at startup, via ``dial`` or
``from_settings``) and passed explicitly to every store that needs it.
"""
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from mongostore.domain.errors import MongoConnectionError

if TYPE_CHECKING:
    from mongostore.core.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Wrapper around a connected MongoClient.

    Resolves named collections for the record stores and exposes a
    liveness check. The underlying client is thread safe, so one
    connection can back any number of stores.
    """

    def __init__(self, client: MongoClient):
        self._client = client

    @classmethod
    def dial(
        cls,
        hosts: str,
        replica_set: str,
        username: str,
        password: str,
        *,
        tls: bool = True,
        tls_allow_invalid_certificates: bool = True,
        auth_source: Optional[str] = None,
        server_selection_timeout_ms: int = 30000,
    ) -> "MongoConnection":
        """
        Connect to MongoDB and verify the connection with a ping.

        Args:
            hosts: Comma separated "host:port" list
            replica_set: Replica set name, empty for a direct connection
            username: User to authenticate as, empty to skip authentication
            password: Password of the user
            tls: Connect over TLS
            tls_allow_invalid_certificates: Skip server certificate verification
            auth_source: Authentication database, defaults to the username
            server_selection_timeout_ms: How long to wait for a usable server

        Returns:
            A connected MongoConnection

        Raises:
            MongoConnectionError: the client could not be created or the ping failed
        """
        options = cls._client_options(
            replica_set,
            username,
            password,
            tls=tls,
            tls_allow_invalid_certificates=tls_allow_invalid_certificates,
            auth_source=auth_source,
            server_selection_timeout_ms=server_selection_timeout_ms,
        )
        host_list = [host.strip() for host in hosts.split(",") if host.strip()]
        if not host_list:
            raise MongoConnectionError("could not connect to mongodb: no hosts given")

        try:
            client = MongoClient(host=host_list, **options)
        except PyMongoError as exc:
            logger.error(f"Could not create MongoDB client for {host_list}: {exc}")
            raise MongoConnectionError("could not connect to mongodb") from exc

        connection = cls(client)
        try:
            connection.ping()
        except MongoConnectionError:
            client.close()
            raise

        logger.info(f"Connected to MongoDB: {','.join(host_list)}")
        return connection

    @classmethod
    def from_settings(cls, settings: "Settings") -> "MongoConnection":
        """Dial using the connection parameters from Settings."""
        return cls.dial(
            settings.mongodb_hosts,
            settings.mongodb_replica_set,
            settings.mongodb_username,
            settings.mongodb_password,
            tls=settings.mongodb_tls,
            tls_allow_invalid_certificates=settings.mongodb_tls_allow_invalid_certificates,
            auth_source=settings.mongodb_auth_source,
            server_selection_timeout_ms=settings.mongodb_server_selection_timeout_ms,
        )

    @staticmethod
    def _client_options(
        replica_set: str,
        username: str,
        password: str,
        *,
        tls: bool,
        tls_allow_invalid_certificates: bool,
        auth_source: Optional[str],
        server_selection_timeout_ms: int,
    ) -> Dict[str, Any]:
        """Build MongoClient keyword options."""
        options: Dict[str, Any] = {
            "tls": tls,
            "serverSelectionTimeoutMS": server_selection_timeout_ms,
        }
        if tls and tls_allow_invalid_certificates:
            options["tlsAllowInvalidCertificates"] = True
        if replica_set:
            options["replicaset"] = replica_set
        if username:
            options["username"] = username
            options["password"] = password
            options["authSource"] = auth_source or username
        return options

    @property
    def client(self) -> MongoClient:
        """The underlying MongoClient."""
        return self._client

    def collection(self, database_name: str, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            database_name: Name of the database
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self._client[database_name][collection_name]

    def ping(self) -> None:
        """Check that the server is reachable and the credentials are accepted."""
        try:
            self._client.admin.command("ping")
        except PyMongoError as exc:
            logger.error(f"MongoDB ping failed: {exc}")
            raise MongoConnectionError("could not ping mongodb") from exc

    def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info("MongoDB connection closed")
