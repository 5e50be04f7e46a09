"""
Runtime settings for the client and the HTTP server.

Defaults live on the Settings dataclass. An optional YAML file overrides
them, and a few environment variables override the file:

    PORT              server port
    RAELEX_BASE_URL   dictionary service base URL
    RAELEX_TIMEOUT    request timeout in seconds
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from raelex.exceptions import ConfigError


@dataclass(frozen=True)
class Settings:
    base_url: str = "https://dle.rae.es/data/"
    auth_token: str = "Basic cDY4MkpnaFMzOmFHZlVkQ2lFNDM0"
    user_agent: str = "Diccionario/2 CFNetwork/808.2.16 Darwin/16.3.0"
    timeout: int = 30
    host: str = "0.0.0.0"
    port: int = 8080


ENV_OVERRIDES = {
    "PORT": "port",
    "RAELEX_BASE_URL": "base_url",
    "RAELEX_TIMEOUT": "timeout",
}

INT_FIELDS = {"timeout", "port"}


def _coerce(name: str, value: Any) -> Any:
    if value is None:
        raise ConfigError(f"Setting '{name}' has no value")
    if name not in INT_FIELDS:
        return str(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Setting '{name}' must be an integer, got {value!r}") from None


def load_yaml_settings(path: Path) -> Dict[str, Any]:
    """Read setting overrides from a YAML file."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown settings in {path}: {', '.join(unknown)}")

    return {name: _coerce(name, value) for name, value in data.items()}


def load_settings(path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None) -> Settings:
    """Build Settings from defaults, an optional YAML file, then the environment."""
    if environ is None:
        environ = dict(os.environ)

    overrides: Dict[str, Any] = {}
    if path is not None:
        overrides.update(load_yaml_settings(Path(path)))

    for var, name in ENV_OVERRIDES.items():
        value = environ.get(var)
        if value:
            overrides[name] = _coerce(name, value)

    return replace(Settings(), **overrides)
