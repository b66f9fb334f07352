"""Build matrix generation from declared Node-API targets."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from napi_matrix.contracts import validate_build_matrix
from napi_matrix.errors import UnsupportedTargetsError
from napi_matrix.manifest import clean_target, read_targets
from napi_matrix.platforms import MatrixEntry, lookup

LOGGER = logging.getLogger(__name__)

MATRIX_OUTPUT = "matrix"
TARGETS_OUTPUT = "targets"
BINDING_DIRECTORY_OUTPUT = "binding-directory"


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class MatrixResult:
    """Resolved build matrix plus the values derived from the manifest."""

    entries: tuple[MatrixEntry, ...]
    targets: tuple[Any, ...]
    binding_directory: str

    def matrix(self) -> dict[str, Any]:
        return {"settings": [entry.as_dict() for entry in self.entries]}

    def outputs(self) -> dict[str, str]:
        """Return the named outputs, serialized for an orchestrator."""
        return {
            MATRIX_OUTPUT: _compact_json(self.matrix()),
            TARGETS_OUTPUT: _compact_json(list(self.targets)),
            BINDING_DIRECTORY_OUTPUT: self.binding_directory,
        }


def resolve_targets(
    targets: Iterable[Any], build_command: str
) -> tuple[list[MatrixEntry], list[str]]:
    """Resolve declared targets, returning entries and unsupported targets in order."""
    entries: list[MatrixEntry] = []
    unsupported: list[str] = []
    for raw in targets:
        target = clean_target(raw) if isinstance(raw, str) else str(raw)
        LOGGER.debug("Processing target: '%s'", target, extra={"target": target})
        entry = lookup(target, build_command)
        if entry is None:
            LOGGER.warning("No config found for target: %s", target, extra={"target": target})
            unsupported.append(target)
            continue
        LOGGER.info("Added config for target: %s", target, extra={"target": target})
        entries.append(entry)
    return entries, unsupported


def build_matrix(
    targets: Iterable[Any],
    build_command: str,
    *,
    binding_directory: str,
) -> MatrixResult:
    """Build a matrix from a declared target list or fail with every unsupported target."""
    declared = tuple(targets)
    entries, unsupported = resolve_targets(declared, build_command)
    if unsupported:
        raise UnsupportedTargetsError(unsupported)
    result = MatrixResult(
        entries=tuple(entries),
        targets=declared,
        binding_directory=binding_directory,
    )
    validate_build_matrix(result.matrix())
    return result


def generate(manifest_path: Path | str, build_command: str) -> MatrixResult:
    """Generate the build matrix for the targets declared in a manifest."""
    targets = read_targets(Path(manifest_path))
    # Keep the directory as written; Path would drop a leading "./".
    binding_directory = os.path.dirname(os.fspath(manifest_path)) or "."
    result = build_matrix(targets, build_command, binding_directory=binding_directory)
    LOGGER.info("Generated matrix for %s targets", len(result.entries))
    LOGGER.debug("Matrix: %s", result.outputs()[MATRIX_OUTPUT])
    LOGGER.info("Binding directory: %s", result.binding_directory)
    return result
