"""Loading the application configuration from JSONC files."""

from __future__ import annotations

import json
import os
import re
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from lwebapi.log import log_error
from lwebapi.models import Config

_TOKENS = re.compile(
    r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/|,(?=(?:\s|//[^\n]*|/\*.*?\*/)*[\]}])', re.DOTALL
)


class ConfigError(Exception):
    """The configuration could not be read or is invalid."""


def parse_jsonc(text: str) -> Any:
    """Parse JSON that may contain comments and trailing commas."""
    cleaned = _TOKENS.sub(lambda m: m.group(0) if m.group(0).startswith('"') else " ", text)
    if not cleaned.strip():
        raise ConfigError("configuration document is empty")
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSONC: {exc}") from exc


def load_config(path: str | os.PathLike[str]) -> Config:
    """Read and validate a configuration file."""
    try:
        return Config.from_dict(parse_jsonc(Path(path).read_text(encoding="utf-8")))
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def get_named_arg(key: str, argv: Sequence[str] | None = None) -> str | None:
    """Value of the first ``key=value`` argument, if any."""
    prefix = f"{key}="
    args = sys.argv[1:] if argv is None else argv
    return next((arg[len(prefix):] for arg in args if arg.startswith(prefix)), None)


def config_path(env: str) -> str:
    """Configuration file for an environment; anything but ``dev`` uses ``app``."""
    return f"./config/{'dev' if env == 'dev' else 'app'}.config.jsonc"


def get_config(argv: Sequence[str] | None = None) -> Config:
    """Load the configuration selected by ``env=``; exit with status 1 on failure."""
    rel_path = config_path(get_named_arg("env", argv) or "app")
    try:
        path = Path(rel_path).resolve(strict=True)
    except OSError as exc:
        log_error(f"警告：无法转换为绝对路径，原因：{exc}\n使用相对路径继续：{rel_path}")
        path = Path(rel_path)
    try:
        return load_config(path)
    except ConfigError as exc:
        log_error(f"配置加载失败: {exc}")
        log_error(f"尝试加载的路径: {path}")
        raise SystemExit(1) from exc