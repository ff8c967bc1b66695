"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gsdx.toml only contains overrides.
A fresh deployment needs no config file at all.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "0.0.0.0"
    port: int = Field(default=9090, ge=1, le=65535)


def _default_max_connections() -> int:
    return os.cpu_count() or 1


class DatabaseConfig(BaseModel):
    """[database] section.

    ``url`` left empty resolves to a SQLite file next to the config file
    (see :meth:`gsdx.config.settings.GsdxSettings.database_url`).
    """

    model_config = {"frozen": True, "populate_by_name": True}

    url: str = ""
    schema_name: str = Field(default="public", alias="schema")
    max_connections: int = Field(default_factory=_default_max_connections, ge=1)
    acquire_timeout: float = Field(default=15.0, gt=0)
    create_schema: bool = True


class HealthConfig(BaseModel):
    """[health] section."""

    model_config = {"frozen": True}

    interval_seconds: float = Field(default=2.0, gt=0)
