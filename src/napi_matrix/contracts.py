"""Schema validation helpers for build matrices and config files."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Mapping

import jsonschema


@lru_cache(maxsize=None)
def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema bundled in the package."""
    with resources.files("napi_matrix.schemas").joinpath(name).open("r", encoding="utf-8") as handle:
        return json.load(handle)


def validate_build_matrix(matrix: Mapping[str, Any]) -> None:
    """Validate a build matrix against the schema."""
    schema = _load_schema("build_matrix.schema.json")
    jsonschema.validate(matrix, schema)


def validate_matrix_config(config: Mapping[str, Any]) -> None:
    """Validate a napi-matrix config payload against the schema."""
    schema = _load_schema("matrix_config.schema.json")
    jsonschema.validate(config, schema)
