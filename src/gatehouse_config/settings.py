"""Gatehouse settings.

Every field maps to an upper-case environment variable of the same name
(``jwt_secret_key`` -> ``JWT_SECRET_KEY``). Variables set in the process
environment win over the first env file found among:

- the path in ``GATEHOUSE_ENV_FILE``
- ``config/.env.dev`` for local development
- ``config/.env`` for deployments
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "GATEHOUSE_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    """Nearest ancestor holding ``config/`` or ``pyproject.toml``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    # Installed without a checkout; fall back to the working directory
    return Path.cwd()


def get_config_dir() -> Path:
    return _project_root() / "config"


def _env_file() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.is_file():
            return path

    config_dir = get_config_dir()
    for name in ENV_FILE_CANDIDATES:
        if (config_dir / name).is_file():
            return config_dir / name
    return None


class Settings(BaseSettings):
    """Runtime configuration for the API, the database and the CLI.

    Only ``jwt_secret_key`` has no default; startup fails without it.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    jwt_secret_key: SecretStr
    jwt_access_token_expire_hours: int = 1
    # bcrypt work factor (log2 rounds); tests lower it to 4
    bcrypt_rounds: int = 12

    app_name: str = "Gatehouse"
    debug: bool = False
    registration_enabled: bool = True
    log_level: str = "INFO"

    database_backend: Literal["sqlite", "postgresql"] = "sqlite"
    sqlite_path: str = "data/gatehouse.db"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr | None = None
    postgres_db: str = "gatehouse"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    # Also exposes /docs, /redoc and /openapi.json
    api_debug: bool = False
    # Comma-separated; empty disables cross-origin access
    api_cors_origins: str = ""

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the selected backend."""
        if self.database_backend == "sqlite":
            return f"sqlite+aiosqlite:///{self.sqlite_path}"

        password = (
            self.postgres_password.get_secret_value() if self.postgres_password else ""
        )
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]


@lru_cache()
def get_settings() -> Settings:
    """Settings for this process, read once from the environment."""
    return Settings()  # type: ignore[call-arg]  # values come from the environment


def clear_settings_cache() -> None:
    """Force the next ``get_settings`` call to re-read the environment."""
    get_settings.cache_clear()
