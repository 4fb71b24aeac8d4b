from __future__ import annotations

from types import SimpleNamespace

import pytest

from employee_attendance.config import get_settings_module, load_settings
from employee_attendance.core.exceptions import ConfigurationError


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "employee_attendance.config.production"),
        ("prod", "employee_attendance.config.production"),
        ("testing", "employee_attendance.config.testing"),
        ("anything", "employee_attendance.config.development"),
    ],
)
def test_get_settings_module(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_missing_jwt_secret_fails_fast():
    with pytest.raises(ConfigurationError, match="JWT_SECRET"):
        load_settings(SimpleNamespace(JWT_SECRET=None, STORE="memory"))


def test_mysql_store_requires_db_password():
    module = SimpleNamespace(JWT_SECRET="s", STORE="mysql", DB_CONFIG={"host": "db", "password": None})

    with pytest.raises(ConfigurationError, match="DB_PASSWORD"):
        load_settings(module)


def test_unknown_store_is_rejected():
    with pytest.raises(ConfigurationError):
        load_settings(SimpleNamespace(JWT_SECRET="s", STORE="redis"))


def test_load_settings_reads_module_values():
    module = SimpleNamespace(
        JWT_SECRET="s",
        STORE="mysql",
        DB_CONFIG={"host": "db", "port": 3307, "user": "app", "password": "pw", "database": "att"},
        PORT="8080",
        DEBUG=True,
        ADMIN_EMPLOYEE_ID="chief",
        CORS_ORIGINS="http://a.test, http://b.test",
        LOG_LEVEL="warning",
    )

    settings = load_settings(module)

    assert settings.port == 8080
    assert settings.debug is True
    assert settings.admin_employee_id == "chief"
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert settings.log_level == "WARNING"
    assert settings.token_ttl_seconds == 3600
    assert settings.db_config["port"] == 3307


def test_testing_module_uses_memory_store(monkeypatch):
    import importlib

    import employee_attendance.config.testing as testing_module

    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.delenv("STORE", raising=False)
    testing_module = importlib.reload(testing_module)

    settings = load_settings(testing_module)

    assert settings.store == "memory"
    assert settings.testing is True
    assert settings.jwt_secret == "from-env"
