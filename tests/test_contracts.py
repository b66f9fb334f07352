from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from napi_matrix import contracts


def _load_fixture(name: str) -> dict:
    path = Path(__file__).parent / "fixtures" / name
    return json.loads(path.read_text(encoding="utf-8"))


def test_build_matrix_schema() -> None:
    contracts.validate_build_matrix(_load_fixture("build_matrix.json"))


def test_build_matrix_schema_rejects_missing_build() -> None:
    matrix = _load_fixture("build_matrix.json")
    del matrix["settings"][0]["build"]
    with pytest.raises(jsonschema.ValidationError):
        contracts.validate_build_matrix(matrix)


def test_build_matrix_schema_rejects_empty_settings() -> None:
    with pytest.raises(jsonschema.ValidationError):
        contracts.validate_build_matrix({"settings": []})


def test_matrix_config_schema() -> None:
    contracts.validate_matrix_config({"build_command": "pnpm build"})
    with pytest.raises(jsonschema.ValidationError):
        contracts.validate_matrix_config({"targets": ["x86_64-apple-darwin"]})
