"""Runtime configuration, read once from the environment at startup."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import TypeAlias

from pydantic import BaseModel, PositiveInt, ValidationError, field_validator

from .constants import DEFAULT_ASSETS_DIR, DEFAULT_LOG_LEVEL, DEFAULT_POOL_SIZE
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

OptionalStr: TypeAlias = str | None


class Settings(BaseModel):
    """Server settings.

    Attributes:
        database_url: SQLAlchemy URL of the package store (``DATABASE_URL``).
        base_url: Public URL of this repository (``URL``), used to build the
            ``Filename``, ``Depiction`` and ``SileoDepiction`` links.
        assets_dir: Directory holding ``CydiaIcon.png``, ``footerIcon.png`` and ``icons/``.
        pool_size: Connection pool size for the database engine.
        log_level: Root log level.
    """

    database_url: str
    base_url: OptionalStr = None
    assets_dir: Path = Path(DEFAULT_ASSETS_DIR)
    pool_size: PositiveInt = DEFAULT_POOL_SIZE
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, value: OptionalStr) -> OptionalStr:
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Raises:
            ConfigError: ``DATABASE_URL`` is unset, or a value fails validation.
        """
        env = os.environ if environ is None else environ

        database_url = env.get("DATABASE_URL", "").strip()
        if not database_url:
            raise ConfigError("DATABASE_URL must be set")

        values: dict[str, str] = {"database_url": database_url}
        for key, field in (
            ("URL", "base_url"),
            ("VAPAS_ASSETS_DIR", "assets_dir"),
            ("VAPAS_POOL_SIZE", "pool_size"),
            ("VAPAS_LOG_LEVEL", "log_level"),
        ):
            if env.get(key):
                values[field] = env[key]

        try:
            settings = cls.model_validate(values)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        if settings.base_url is None:
            logger.warning("URL is not set; /Packages will fail until it is configured.")
        return settings

    def require_base_url(self) -> str:
        """Return the public base URL, or raise ``ConfigError`` if it was never set."""
        if self.base_url is None:
            raise ConfigError("URL must be set")
        return self.base_url
