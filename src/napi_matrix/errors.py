"""Exceptions raised while generating a build matrix."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class MatrixError(RuntimeError):
    """Base class for fatal build matrix generation failures."""

    pass


class ConfigError(MatrixError):
    """Raised when a napi-matrix config file is invalid."""

    pass


class ManifestError(MatrixError):
    """Raised when the manifest does not have the expected shape."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class ManifestNotFoundError(ManifestError):
    """Raised when the manifest path does not point at a file."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"{path} not found")


class ManifestParseError(ManifestError):
    """Raised when the manifest cannot be read or decoded."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(path, f"Failed to parse {path}: {detail}")


class NoTargetsDeclaredError(ManifestError):
    """Raised when napi.targets is missing, not a list, or empty."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"No napi.targets found in {path}")


class UnsupportedTargetsError(MatrixError):
    """Raised with every declared target that has no registered platform."""

    def __init__(self, targets: Iterable[str]) -> None:
        self.targets = list(targets)
        super().__init__(f"Unsupported targets found: {', '.join(self.targets)}")
