import pytest

from mongostore.core import config
from mongostore.core.config import Settings, get_settings, reset_settings

MONGODB_VARS = [
    "MONGODB_SERVER",
    "MONGODB_REPLICASET_NAME",
    "MONGODB_USERNAME",
    "MONGODB_PASSWORD",
    "MONGODB_AUTH_SOURCE",
    "MONGODB_DATABASE",
    "MONGODB_COLLECTION",
    "MONGODB_TLS",
    "MONGODB_TLS_INSECURE",
    "MONGODB_SERVER_SELECTION_TIMEOUT_MS",
    "MONGODB_ATOMIC_UPSERT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in MONGODB_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_defaults():
    settings = Settings()

    assert settings.mongodb_hosts == "localhost:27017"
    assert settings.mongodb_replica_set == ""
    assert settings.mongodb_username == ""
    assert settings.mongodb_auth_source is None
    assert settings.mongodb_database == "eventsource"
    assert settings.mongodb_collection == "aggregates"
    assert settings.mongodb_tls is True
    assert settings.mongodb_tls_allow_invalid_certificates is True
    assert settings.mongodb_server_selection_timeout_ms == 30000
    assert settings.mongodb_atomic_upsert is False


def test_auth_source_defaults_to_username(monkeypatch):
    monkeypatch.setenv("MONGODB_USERNAME", "billing")

    assert Settings().mongodb_auth_source == "billing"


def test_explicit_auth_source_wins(monkeypatch):
    monkeypatch.setenv("MONGODB_USERNAME", "billing")
    monkeypatch.setenv("MONGODB_AUTH_SOURCE", "admin")

    assert Settings().mongodb_auth_source == "admin"


@pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("YES", True), ("false", False), ("0", False)])
def test_boolean_flags(monkeypatch, value, expected):
    monkeypatch.setenv("MONGODB_ATOMIC_UPSERT", value)

    assert Settings().mongodb_atomic_upsert is expected


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("MONGODB_DATABASE", "ledger")

    assert get_settings() is first
    reset_settings()
    assert get_settings().mongodb_database == "ledger"
