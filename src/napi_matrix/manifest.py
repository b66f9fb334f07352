"""Read declared Node-API targets from a package manifest."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping

from napi_matrix.errors import (
    ManifestNotFoundError,
    ManifestParseError,
    NoTargetsDeclaredError,
)

LOGGER = logging.getLogger(__name__)

LINE_BREAKS = re.compile(r"\r?\n|\r")


def clean_target(value: str) -> str:
    """Strip whitespace and drop line breaks left over from manifest formatting."""
    return LINE_BREAKS.sub("", value.strip())


def load_manifest(path: Path) -> Any:
    """Load the manifest JSON document from disk."""
    if not path.is_file():
        raise ManifestNotFoundError(path)
    LOGGER.info("Reading manifest from: %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestParseError(path, str(exc)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, str(exc)) from exc


def declared_targets(manifest: Any, path: Path) -> list[Any]:
    """Return the napi.targets list of a loaded manifest."""
    napi = manifest.get("napi") if isinstance(manifest, Mapping) else None
    targets = napi.get("targets") if isinstance(napi, Mapping) else None
    if not isinstance(targets, list) or not targets:
        raise NoTargetsDeclaredError(path)
    return targets


def read_targets(path: Path) -> list[Any]:
    """Load a manifest and return its declared targets, verbatim."""
    targets = declared_targets(load_manifest(path), path)
    LOGGER.info("Found %s targets", len(targets))
    LOGGER.debug("Raw targets: %s", targets)
    return targets
