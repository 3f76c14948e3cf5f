"""Configuration loading.

Settings live in ``shopfront.toml`` at the project root. Base tables apply to
every environment; a table named after the active environment (``[test]``,
``[production]``...) is deep-merged on top. ``SHOPFRONT_ENV`` selects the
environment and ``SHOPFRONT_CONFIG`` points at an alternative file.
"""

import copy
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

ENVIRONMENTS = ("development", "test", "staging", "production")

DEFAULTS: dict[str, Any] = {
    "service_name": "shopfront",
    "server": {"host": "0.0.0.0", "port": 3000},
    "identity": {"token_bytes": 32},
    "catalog": {
        "products": [
            {"id": 1, "name": "Produto A", "price": 100.0},
            {"id": 2, "name": "Produto B", "price": 200.0},
        ]
    },
    "logging": {"level": None, "directory": "logs"},
}

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def current_env() -> str:
    return os.getenv("SHOPFRONT_ENV", "development").lower()


def _deep_merge(base: dict, overlay: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _config_path() -> Path:
    override = os.getenv("SHOPFRONT_CONFIG")
    if override:
        return Path(override)
    return _PROJECT_ROOT / "shopfront.toml"


@dataclass(frozen=True)
class Config:
    """Resolved settings for one environment."""

    env: str
    service_name: str
    host: str
    port: int
    token_bytes: int
    products: list[dict] = field(default_factory=list)
    log_level: str | None = None
    log_directory: str = "logs"

    @classmethod
    def from_dict(cls, data: dict, env: str) -> "Config":
        return cls(
            env=env,
            service_name=data["service_name"],
            host=data["server"]["host"],
            port=int(data["server"]["port"]),
            token_bytes=int(data["identity"]["token_bytes"]),
            products=list(data["catalog"]["products"]),
            log_level=data["logging"].get("level"),
            log_directory=data["logging"].get("directory", "logs"),
        )


def load_config(path: str | Path | None = None, env: str | None = None) -> Config:
    """Read the TOML file (if any) and apply the environment overlay."""
    env = (env or current_env()).lower()
    config_path = Path(path) if path else _config_path()

    raw: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)

    base = {key: value for key, value in raw.items() if key not in ENVIRONMENTS}
    data = _deep_merge(DEFAULTS, base)
    if isinstance(raw.get(env), dict):
        data = _deep_merge(data, raw[env])

    return Config.from_dict(data, env)
