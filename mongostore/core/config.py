# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Record store settings loaded from environment variables.

    Connection parameters are passed to MongoConnection.dial, database and
    collection names to MongoRecordStore. Every setting has a default so
    the store can be wired up against a local server without a .env file.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Connection Configuration
        # Comma separated host list, e.g. "db-0:27017,db-1:27017,db-2:27017"
        self.mongodb_hosts: Final[str] = os.getenv("MONGODB_SERVER", "localhost:27017")
        # Empty means a direct (non replica set) connection
        self.mongodb_replica_set: Final[str] = os.getenv("MONGODB_REPLICASET_NAME", "")
        self.mongodb_username: Final[str] = os.getenv("MONGODB_USERNAME", "")
        self.mongodb_password: Final[str] = os.getenv("MONGODB_PASSWORD", "")
        # Users authenticate against a database named after themselves unless overridden
        self.mongodb_auth_source: Final[Optional[str]] = (
            os.getenv("MONGODB_AUTH_SOURCE") or self.mongodb_username or None
        )
        self.mongodb_tls: Final[bool] = _env_flag("MONGODB_TLS", "true")
        self.mongodb_tls_allow_invalid_certificates: Final[bool] = _env_flag(
            "MONGODB_TLS_INSECURE", "true"
        )
        self.mongodb_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "30000")
        )

        # Store Configuration
        self.mongodb_database: Final[str] = os.getenv("MONGODB_DATABASE", "eventsource")
        self.mongodb_collection: Final[str] = os.getenv("MONGODB_COLLECTION", "aggregates")
        # Single-round-trip upsert instead of count-then-insert/update
        self.mongodb_atomic_upsert: Final[bool] = _env_flag("MONGODB_ATOMIC_UPSERT", "false")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get record store settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
