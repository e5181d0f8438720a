"""
Employee Service: Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Connection string:
    The database location and its password arrive separately. DATABASE_URL
    carries the descriptor (driver, user, host, port, database) and
    DATABASE_PASSWORD carries the secret. `connection_string` combines the two
    into the single URL handed to the engine.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development against a
    PostgreSQL instance on localhost.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: postgresql+asyncpg://user@host:port/dbname (no password here)
    database_url: str = Field(
        default="postgresql+asyncpg://employee@localhost:5432/employees",
        description="Async SQLAlchemy connection descriptor, without the password",
    )

    # Kept out of database_url so it can be mounted from a secret store
    database_password: SecretStr = Field(
        default=SecretStr(""),
        description="Password appended to database_url at startup",
    )

    # Valid range: 1-100 (PostgreSQL default max_connections is 100)
    db_pool_size: int = Field(default=10, ge=1, le=100)
    db_max_overflow: int = Field(default=5, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    # DEBUG also turns on SQL echo in the engine
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Rejects descriptors SQLAlchemy cannot parse."""
        try:
            make_url(v)
        except Exception as e:
            raise ValueError(f"Invalid database_url: {e}") from e
        return v

    @property
    def connection_string(self) -> str:
        """
        What: The descriptor with the password filled in.
        How:  Parses database_url and sets the password component, so special
              characters in the secret are escaped correctly.
        """
        password = self.database_password.get_secret_value()
        url = make_url(self.database_url)
        if password:
            url = url.set(password=password)
        return url.render_as_string(hide_password=False)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
    }


settings = Settings()
