"""Config loading entry points for dsmeta."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import DsMetaConfig

ENV_OVERRIDES: Mapping[str, str] = {
    "DSMETA_DEFAULT_LOCATION": "datasets.default_location",
    "DSMETA_DEFAULT_FORMAT": "datasets.default_format",
}


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> DsMetaConfig:
    """Load the dsmeta configuration applying environment and explicit overrides."""

    merged: dict[str, Any] = {}
    if path:
        merged = _expect_mapping(_read_structured_file(path), path)

    env_values = {
        dotted: os.environ[name].strip()
        for name, dotted in ENV_OVERRIDES.items()
        if os.environ.get(name, "").strip()
    }
    if env_values:
        merged = _deep_merge(merged, _expand_override_keys(env_values))

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    try:
        return DsMetaConfig.model_validate(merged)
    except ValidationError as exc:
        source = path if path else "defaults"
        raise ConfigError(f"Invalid configuration ({source}): {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest``."""

    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported; use a YAML or JSON destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)
    payload = DsMetaConfig().model_dump(mode="json")
    if dest.suffix.lower() == ".json":
        dest.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(payload, sort_keys=False),
        encoding="utf-8",
    )


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text) or {}
    if suffix == ".toml":
        return tomllib.loads(text)
    if suffix == ".json":
        return json.loads(text)

    raise ConfigError(f"Unsupported config format for {path}")


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = {key: value for key, value in base.items()}
    for key, value in extra.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``datasets.default_format``."""

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        converted = _expand_single_override(key, value)
        result = _deep_merge(result, converted)
    return result


def _expand_single_override(key: Any, value: Any) -> dict[str, Any]:
    if isinstance(key, str) and "." in key:
        parts = key.split(".")
        cursor: dict[str, Any] = {}
        root = cursor
        for segment in parts[:-1]:
            next_cursor: dict[str, Any] = {}
            cursor[segment] = next_cursor
            cursor = next_cursor
        cursor[parts[-1]] = value
        return root
    return {key: value}


__all__ = [
    "ConfigError",
    "ENV_OVERRIDES",
    "load_config",
    "dump_example_config",
]
