from pathlib import Path

import pytest

from vapas.config import Settings
from vapas.exceptions import ConfigError


def test_from_env_defaults():
    settings = Settings.from_env({"DATABASE_URL": "postgresql://u@db/vapas"})
    assert settings.database_url == "postgresql://u@db/vapas"
    assert settings.base_url is None
    assert settings.assets_dir == Path("assets")
    assert settings.pool_size == 5
    assert settings.log_level == "INFO"


def test_from_env_all_values():
    settings = Settings.from_env(
        {
            "DATABASE_URL": "sqlite:///x.db",
            "URL": "https://repo.example/",
            "VAPAS_ASSETS_DIR": "/srv/assets",
            "VAPAS_POOL_SIZE": "12",
            "VAPAS_LOG_LEVEL": "debug",
        }
    )
    assert settings.base_url == "https://repo.example"
    assert settings.assets_dir == Path("/srv/assets")
    assert settings.pool_size == 12
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("env", [{}, {"DATABASE_URL": "  "}])
def test_missing_database_url_is_fatal(env):
    with pytest.raises(ConfigError, match="DATABASE_URL"):
        Settings.from_env(env)


@pytest.mark.parametrize("pool_size", ["many", "0"])
def test_bad_pool_size(pool_size):
    with pytest.raises(ConfigError):
        Settings.from_env({"DATABASE_URL": "sqlite://", "VAPAS_POOL_SIZE": pool_size})


def test_require_base_url():
    assert Settings(database_url="sqlite://", base_url="https://r.example").require_base_url() == (
        "https://r.example"
    )
    with pytest.raises(ConfigError, match="URL"):
        Settings(database_url="sqlite://").require_base_url()


def test_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///env.db")
    monkeypatch.setenv("URL", "https://env.example")
    settings = Settings.from_env()
    assert settings.base_url == "https://env.example"
