"""
Connection settings for the employee tracker database.

Values come from the process environment; app.py loads a .env file
with python-dotenv before these are read.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 5432


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class DatabaseSettings:
    """PostgreSQL connection and pool settings"""

    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    min_connections: int = 1
    max_connections: int = 5

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        """
        Build settings from DB_* environment variables.

        DB_USER, DB_PASSWORD and DB_NAME carry the credentials; DB_HOST and
        DB_PORT default to localhost:5432.
        """
        return cls(
            user=os.getenv("DB_USER"),
            password=os.getenv("DB_PASSWORD"),
            database=os.getenv("DB_NAME"),
            host=os.getenv("DB_HOST", "") or DEFAULT_HOST,
            port=_int_from_env("DB_PORT", DEFAULT_PORT),
            min_connections=_int_from_env("DB_MIN_CONNECTIONS", 1),
            max_connections=_int_from_env("DB_MAX_CONNECTIONS", 5),
        )

    def connection_params(self) -> Dict[str, Any]:
        """Keyword arguments for psycopg2.connect / psycopg2 pools."""
        params = {
            "host": self.host,
            "port": self.port,
            "client_encoding": "UTF8",
        }
        if self.user:
            params["user"] = self.user
        if self.password:
            params["password"] = self.password
        if self.database:
            params["database"] = self.database
        return params

    def describe(self) -> str:
        """Connection target without credentials, for log lines."""
        return f"{self.database or '<default>'}@{self.host}:{self.port}"
