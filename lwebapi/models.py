"""Application configuration and shared state."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any


def _get(data: Any, name: str, kind: type) -> Any:
    if not isinstance(data, Mapping) or name not in data:
        raise ValueError(f"missing field `{name}`")
    value = data[name]
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 65535:
            raise ValueError(f"field `{name}` must be an integer from 0 to 65535")
    elif not isinstance(value, kind):
        raise ValueError(f"field `{name}` must be of type {kind.__name__}")
    return value


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection settings for one named database."""

    key: str
    database_type: str
    host: str
    port: int
    username: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, data: Any) -> DatabaseConfig:
        return cls(**{f.name: _get(data, f.name, int if f.name == "port" else str) for f in fields(cls)})


@dataclass(frozen=True)
class Config:
    """Top-level application configuration."""

    version: str
    host: str
    port: int
    databases: list[DatabaseConfig]

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        return cls(
            version=_get(data, "version", str),
            host=_get(data, "host", str),
            port=_get(data, "port", int),
            databases=[DatabaseConfig.from_dict(d) for d in _get(data, "databases", list)],
        )


@dataclass
class AppState:
    """Open database engines by key."""

    db_map: dict[str, Any] = field(default_factory=dict)