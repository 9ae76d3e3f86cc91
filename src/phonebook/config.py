"""
Service configuration.

Settings is built once at startup with Settings.from_env() and passed to
whatever needs it; nothing reads the environment after that. Load a .env
file (python-dotenv) before calling from_env() if you use one.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from phonebook.domain import MAX_FIELD_LENGTH


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


def _port(env: Mapping[str, str]) -> int:
    # Accept the ":8080" listen-address form as well as a bare port.
    raw = env.get("HTTP_SERVER_PORT", "").strip().lstrip(":")
    return _positive_int({"HTTP_SERVER_PORT": raw}, "HTTP_SERVER_PORT", 8080)


@dataclass(frozen=True)
class Settings:
    """HTTP port, page size, MongoDB location and field size limit."""

    http_port: int = 8080
    limit_per_page: int = 10
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "phoneBook"
    mongo_collection_name: str = "contacts"
    max_field_length: int = MAX_FIELD_LENGTH
    mongo_timeout_ms: int = 10_000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Read settings from env (default os.environ). Unset or empty values use defaults."""
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            http_port=_port(env),
            limit_per_page=_positive_int(env, "LIMIT_PER_PAGE", defaults.limit_per_page),
            mongo_uri=env.get("MONGO_URI", "").strip() or defaults.mongo_uri,
            mongo_db_name=env.get("MONGO_DB", "").strip() or defaults.mongo_db_name,
            mongo_collection_name=(
                env.get("MONGO_COLLECTION", "").strip() or defaults.mongo_collection_name
            ),
            max_field_length=_positive_int(
                env, "MAX_SIZE_PROPERTY", defaults.max_field_length
            ),
            mongo_timeout_ms=_positive_int(
                env, "MONGO_TIMEOUT_MS", defaults.mongo_timeout_ms
            ),
            log_level=env.get("LOG_LEVEL", "").strip().upper() or defaults.log_level,
        )
