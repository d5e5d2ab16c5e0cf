"""
GenexMart Backend: Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       coerces types, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Store connection:
    The store is addressed by the DB_HOST / DB_USER / DB_PASSWORD / DB_NAME
    variables and reached through the aiomysql driver. DATABASE_URL, when
    set, replaces the composed URL entirely (the test suite points it at
    SQLite).
"""

from datetime import date
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default, so the service starts against a
    local MySQL instance with no configuration at all.
    """

    # ── Database ──────────────────────────────────────────────────────────
    db_host: str = Field(default="localhost")
    db_user: str = Field(default="root")
    db_password: str = Field(default="")
    db_name: str = Field(default="genexmart")

    # Full SQLAlchemy URL; overrides the DB_* values above when non-empty
    database_url: str = Field(
        default="",
        description="Async SQLAlchemy connection URL override",
    )

    @property
    def sqlalchemy_url(self) -> str:
        """
        What: The URL handed to create_async_engine().
        How:  DATABASE_URL if given, otherwise mysql+aiomysql built from DB_*.
        """
        if self.database_url:
            return self.database_url
        url = URL.create(
            "mysql+aiomysql",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    # ── Record Defaults ───────────────────────────────────────────────────
    # Placeholders written when the client leaves a column out
    default_gender_id: str = Field(default="L")
    default_birth_date: date = Field(default=date(2000, 1, 1))
    default_birth_place: str = Field(default="City")
    default_cashier_id: str = Field(default="C001")

    # Written to products.CREATED_BY / UPDATED_BY
    audit_actor: str = Field(default="API")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated URLs; "*" opens the API to every origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DB_HOST and db_host both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
