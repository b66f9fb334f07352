from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import pytest  # noqa: E402

from napi_matrix import config as matrix_config  # noqa: E402
from napi_matrix import outputs  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path) -> None:
    """Prevent local configs and CI variables from bleeding into tests."""
    monkeypatch.setenv(matrix_config.ENV_CONFIG_PATH, str(tmp_path / "missing_config.json"))
    monkeypatch.delenv(matrix_config.ENV_PACKAGE_JSON, raising=False)
    monkeypatch.delenv(matrix_config.ENV_BUILD_COMMAND, raising=False)
    monkeypatch.delenv(outputs.ENV_GITHUB_OUTPUT, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop handlers installed by configure_logging once a test finishes."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
