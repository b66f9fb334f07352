"""Publish generated matrix outputs for an orchestrator."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from actions_toolkit import core

from napi_matrix.matrix import MatrixResult

LOGGER = logging.getLogger(__name__)

OUTPUT_MODES = ("auto", "github", "json")
ENV_GITHUB_OUTPUT = "GITHUB_OUTPUT"


def resolve_output_mode(mode: str) -> str:
    """Resolve the auto mode based on the GitHub Actions environment."""
    if mode not in OUTPUT_MODES:
        raise ValueError(f"Unknown output mode: {mode}")
    if mode != "auto":
        return mode
    return "github" if os.environ.get(ENV_GITHUB_OUTPUT) else "json"


def outputs_document(result: MatrixResult) -> dict[str, object]:
    """Return the outputs as a single JSON-compatible document."""
    return {
        "matrix": result.matrix(),
        "targets": list(result.targets),
        "binding-directory": result.binding_directory,
    }


def publish_github_outputs(result: MatrixResult) -> None:
    """Set each named output as a GitHub Actions step output."""
    for name, value in result.outputs().items():
        core.set_output(name, value)
        LOGGER.debug("Set output %s", name)


def write_outputs_json(result: MatrixResult, output_path: Path | None = None) -> None:
    """Write the outputs document to a file, or stdout when no path is given."""
    text = json.dumps(outputs_document(result), indent=2)
    if output_path is None:
        print(text)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text + "\n", encoding="utf-8")
    LOGGER.info("Matrix outputs written to %s", output_path)


def publish_outputs(
    result: MatrixResult,
    mode: str = "auto",
    output_path: Path | None = None,
) -> str:
    """Publish matrix outputs and return the resolved mode."""
    resolved = resolve_output_mode(mode)
    if resolved == "github":
        publish_github_outputs(result)
    else:
        write_outputs_json(result, output_path)
    return resolved
