"""Default settings for matrix generation."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema

from napi_matrix.contracts import validate_matrix_config
from napi_matrix.errors import ConfigError

ENV_CONFIG_PATH = "NAPI_MATRIX_CONFIG"
ENV_PACKAGE_JSON = "NAPI_MATRIX_PACKAGE_JSON"
ENV_BUILD_COMMAND = "NAPI_MATRIX_BUILD_COMMAND"
CONFIG_FILENAME = ".napi-matrix.json"

DEFAULT_PACKAGE_JSON = "package.json"
DEFAULT_BUILD_COMMAND = "yarn build"


@dataclass(frozen=True)
class MatrixConfig:
    """Settings used when the CLI does not override them."""

    package_json_path: str = DEFAULT_PACKAGE_JSON
    build_command: str = DEFAULT_BUILD_COMMAND

    def as_dict(self) -> dict[str, str]:
        return {
            "package_json_path": self.package_json_path,
            "build_command": self.build_command,
        }


def _candidate_config_paths(explicit_path: Path | None) -> list[Path]:
    """Return candidate config locations in priority order."""
    if explicit_path is not None:
        return [explicit_path]
    candidates: list[Path] = []
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        candidates.append(Path(env_path))
    candidates.append(Path.cwd() / CONFIG_FILENAME)
    return candidates


def _load_config_file(path: Path) -> dict[str, Any]:
    """Load and validate a single config file."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Failed to load config {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Config {path} must be a JSON object.")
    try:
        validate_matrix_config(payload)
    except jsonschema.ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc.message}") from exc
    return payload


def load_matrix_config(path: Path | None = None) -> MatrixConfig:
    """Resolve settings from a config file and environment overrides."""
    config = MatrixConfig()
    if path is not None and not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    for candidate in _candidate_config_paths(path):
        if candidate.exists():
            config = replace(config, **_load_config_file(candidate))
            break
    package_json = os.environ.get(ENV_PACKAGE_JSON)
    if package_json:
        config = replace(config, package_json_path=package_json)
    build_command = os.environ.get(ENV_BUILD_COMMAND)
    if build_command:
        config = replace(config, build_command=build_command)
    return config
