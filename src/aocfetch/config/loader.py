"""Config loading entry points for aoc-fetch."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from aocfetch.errors import ConfigError

from .models import AocFetchConfig

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[no-redef]

CONFIG_FILENAMES = ("config.yaml", "config.yml", "config.toml", "config.json")


def load_config(
    path: Path | None = None,
    *,
    config_dir: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> AocFetchConfig:
    """Load the aoc-fetch configuration applying optional overrides.

    An explicit ``path`` must exist. Otherwise the first ``config.*`` file found
    in ``config_dir`` is used, and built-in defaults apply when there is none.
    """

    if path is not None:
        config_data = _expect_mapping(_read_structured_file(path), path)
    else:
        found = find_config_file(config_dir) if config_dir is not None else None
        config_data = _expect_mapping(_read_structured_file(found), found) if found else {}

    merged: dict[str, Any] = dict(config_data)
    if overrides:
        merged = _deep_merge(merged, overrides)

    try:
        return AocFetchConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def find_config_file(config_dir: Path) -> Path | None:
    """Return the first known config file present in ``config_dir``."""

    for name in CONFIG_FILENAMES:
        candidate = config_dir / name
        if candidate.is_file():
            return candidate
    return None


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
    if suffix not in {".yaml", ".yml", ".toml", ".json"}:
        raise ConfigError(f"Unsupported config format for {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        return json.loads(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to parse config file {path}: {exc}") from exc


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Overlay ``extra`` on ``base`` section by section, returning a new dict."""

    merged = dict(base)
    for key, value in extra.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            value = _deep_merge(current, value)
        merged[key] = value
    return merged


__all__ = [
    "CONFIG_FILENAMES",
    "ConfigError",
    "find_config_file",
    "load_config",
]
