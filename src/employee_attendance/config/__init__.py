"""Settings selection and loading.

Settings modules only read the environment; ``load_settings`` validates the
result and fails fast when a secret is missing.
"""
from __future__ import annotations

import importlib
import os
from dataclasses import dataclass, field
from types import ModuleType
from typing import Optional, Union

from ..core.constants import (
    DEFAULT_ADMIN_EMPLOYEE_ID,
    DEFAULT_CORS_ORIGINS,
    DEFAULT_PORT,
    DEFAULT_TOKEN_TTL_SECONDS,
)
from ..core.exceptions import ConfigurationError


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return f"{__name__}.production"

    if env in {"test", "testing"}:
        return f"{__name__}.testing"

    return f"{__name__}.development"


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    db_config: dict = field(default_factory=dict)
    store: str = "mysql"
    port: int = DEFAULT_PORT
    debug: bool = False
    testing: bool = False
    auto_init_db: bool = False
    admin_employee_id: str = DEFAULT_ADMIN_EMPLOYEE_ID
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS
    cors_origins: tuple[str, ...] = (DEFAULT_CORS_ORIGINS,)
    log_level: str = "INFO"


def _split_origins(value: Optional[str]) -> tuple[str, ...]:
    raw = value or DEFAULT_CORS_ORIGINS
    return tuple(o.strip() for o in raw.split(",") if o.strip())


def load_settings(module: Union[str, ModuleType, None] = None) -> Settings:
    if module is None:
        module = get_settings_module()
    if isinstance(module, str):
        module = importlib.import_module(module)

    jwt_secret = getattr(module, "JWT_SECRET", None)
    if not jwt_secret:
        raise ConfigurationError("JWT_SECRET must be set")

    store = str(getattr(module, "STORE", "mysql") or "mysql").lower()
    if store not in {"mysql", "memory"}:
        raise ConfigurationError(f"Unsupported STORE: {store}")

    db_config = dict(getattr(module, "DB_CONFIG", None) or {})
    if store == "mysql" and not db_config.get("password"):
        raise ConfigurationError("DB_PASSWORD must be set")

    return Settings(
        jwt_secret=str(jwt_secret),
        db_config=db_config,
        store=store,
        port=int(getattr(module, "PORT", DEFAULT_PORT)),
        debug=bool(getattr(module, "DEBUG", False)),
        testing=bool(getattr(module, "TESTING", False)),
        auto_init_db=bool(getattr(module, "AUTO_INIT_DB", False)),
        admin_employee_id=str(getattr(module, "ADMIN_EMPLOYEE_ID", DEFAULT_ADMIN_EMPLOYEE_ID)),
        token_ttl_seconds=int(getattr(module, "TOKEN_TTL_SECONDS", DEFAULT_TOKEN_TTL_SECONDS)),
        cors_origins=_split_origins(getattr(module, "CORS_ORIGINS", None)),
        log_level=str(getattr(module, "LOG_LEVEL", "INFO")).upper(),
    )
