"""Reading, writing and editing the default CLI configuration."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

DEFAULT_NODE_ADDR = "grpc.trongrid.io:50051"
DEFAULT_TIMEOUT = 20
DEFAULT_PORT = "50051"
CONFIG_FILE_NAME = "config.default"

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

_BOOL_PARAMS = {
    "ledger": "ledger",
    "verbose": "verbose",
    "nopretty": "no_pretty",
    "withTLS": "with_tls",
}


class ConfigError(ValueError):
    """Raised for unknown parameters, bad values or unreadable config files."""


@dataclass
class Config:
    """The CLI configuration schema."""

    node: str = DEFAULT_NODE_ADDR
    ledger: bool = False
    verbose: bool = False
    timeout: int = DEFAULT_TIMEOUT
    no_pretty: bool = False
    api_key: str = ""
    with_tls: bool = False

    def _yaml_dict(self) -> dict:
        return {
            "node": self.node,
            "ledger": self.ledger,
            "verbose": self.verbose,
            "timeout": self.timeout,
            "noPretty": self.no_pretty,
            "apiKey": self.api_key,
            "withTLS": self.with_tls,
        }

    def _json_dict(self) -> dict:
        return {
            "Node": self.node,
            "Ledger": self.ledger,
            "Verbose": self.verbose,
            "Timeout": self.timeout,
            "NoPretty": self.no_pretty,
            "APIKey": self.api_key,
            "WithTLS": self.with_tls,
        }


def _parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"invalid boolean value: {value!r}")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def default_config_dir() -> Path:
    """Return the directory that holds the config file."""
    home = os.environ.get("HOME") or str(Path.home())
    return Path(home) / ".config" / "tronctl"


def load_config(path) -> Config:
    """Read a YAML config file; missing keys keep their empty values."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} is not a mapping")
    try:
        return Config(
            node=str(data.get("node") or ""),
            ledger=bool(data.get("ledger", False)),
            verbose=bool(data.get("verbose", False)),
            timeout=int(data.get("timeout") or 0),
            no_pretty=bool(data.get("noPretty", False)),
            api_key=str(data.get("apiKey") or ""),
            with_tls=bool(data.get("withTLS", False)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid value in config {path}: {exc}") from exc


def save_config(config: Config, path) -> None:
    """Write the config to ``path`` as YAML, readable by the owner only."""
    out = yaml.safe_dump(config._yaml_dict(), sort_keys=False)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(out)


def init_config(config_dir=None) -> Config:
    """Load the config, writing defaults when it is missing, broken or has no node."""
    directory = Path(config_dir) if config_dir is not None else default_config_dir()
    directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    path = directory / CONFIG_FILE_NAME
    try:
        config = load_config(path)
    except (OSError, ConfigError):
        config = None
    if config is None or not config.node:
        config = Config()
        save_config(config, path)
    return config


def set_config_value(config: Config, param: str, value: str) -> Config:
    """Return a copy of ``config`` with one parameter changed."""
    if param == "node":
        if ":" not in value:
            value = f"{value}:{DEFAULT_PORT}"
        return replace(config, node=value)
    if param == "apiKey":
        return replace(config, api_key=value)
    if param in _BOOL_PARAMS:
        return replace(config, **{_BOOL_PARAMS[param]: _parse_bool(value)})
    raise ConfigError("parameter not found")


def get_config_value(config: Config, param: str) -> str:
    """Return one parameter, or ``all`` of them as JSON, as printed text."""
    if param == "all":
        return json.dumps(config._json_dict(), indent=2)
    if param == "node":
        return config.node
    if param == "apiKey":
        return config.api_key
    if param in _BOOL_PARAMS:
        return _format_bool(getattr(config, _BOOL_PARAMS[param]))
    raise ConfigError("parameter not found")