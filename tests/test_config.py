"""Tests for Settings.from_env."""

import pytest

from phonebook.config import Settings


def test_defaults_when_env_empty() -> None:
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.http_port == 8080
    assert settings.limit_per_page == 10
    assert settings.mongo_db_name == "phoneBook"
    assert settings.mongo_collection_name == "contacts"
    assert settings.max_field_length == 100


def test_values_read_from_env() -> None:
    settings = Settings.from_env(
        {
            "HTTP_SERVER_PORT": ":9090",
            "LIMIT_PER_PAGE": "25",
            "MONGO_URI": "mongodb://mongo:27017",
            "MONGO_DB": "book",
            "MONGO_COLLECTION": "people",
            "MAX_SIZE_PROPERTY": "50",
            "MONGO_TIMEOUT_MS": "2000",
            "LOG_LEVEL": "debug",
        }
    )
    assert settings.http_port == 9090
    assert settings.limit_per_page == 25
    assert settings.mongo_uri == "mongodb://mongo:27017"
    assert settings.mongo_db_name == "book"
    assert settings.mongo_collection_name == "people"
    assert settings.max_field_length == 50
    assert settings.mongo_timeout_ms == 2000
    assert settings.log_level == "DEBUG"


def test_bare_port_accepted() -> None:
    assert Settings.from_env({"HTTP_SERVER_PORT": "8000"}).http_port == 8000


@pytest.mark.parametrize("name", ["LIMIT_PER_PAGE", "MAX_SIZE_PROPERTY", "HTTP_SERVER_PORT"])
def test_invalid_numbers_rejected(name: str) -> None:
    with pytest.raises(ValueError, match=name):
        Settings.from_env({name: "ten"})
    with pytest.raises(ValueError, match=name):
        Settings.from_env({name: "0"})


def test_reads_os_environ_by_default(monkeypatch) -> None:
    monkeypatch.setenv("LIMIT_PER_PAGE", "3")
    assert Settings.from_env().limit_per_page == 3
