from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def write_manifest(path: Path, payload: Any) -> Path:
    """Write a package.json-style manifest and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def write_targets(path: Path, targets: list[Any]) -> Path:
    """Write a manifest declaring the given napi.targets."""
    return write_manifest(path, {"name": "binding", "napi": {"targets": targets}})
