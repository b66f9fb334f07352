from __future__ import annotations

import json
import logging
from pathlib import Path

from napi_matrix.logging_utils import (
    AnnotationHandler,
    HumanFormatter,
    LogOptions,
    configure_logging,
)


def test_configure_logging_writes_json(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "napi-matrix.jsonl"
    configure_logging(LogOptions(log_file=log_path))
    logger = logging.getLogger("napi_matrix.test")
    logger.info("hello", extra={"target": "x86_64-apple-darwin"})
    logging.shutdown()

    lines = log_path.read_text(encoding="utf-8").strip().splitlines()
    assert lines
    payload = json.loads(lines[-1])
    assert payload["message"] == "hello"
    assert payload["level"] == "info"
    assert payload["extra"]["target"] == "x86_64-apple-darwin"


def test_human_formatter_prefixes_target() -> None:
    formatter = HumanFormatter("%(levelname)s: %(message)s")
    record = logging.makeLogRecord(
        {"levelname": "WARNING", "msg": "No config found", "target": "bogus"}
    )
    assert formatter.format(record) == "[bogus] WARNING: No config found"


def test_quiet_console_level() -> None:
    root = configure_logging(LogOptions(quiet=True))
    assert root.handlers[0].level == logging.WARNING
    root = configure_logging(LogOptions(verbose=1))
    assert root.handlers[0].level == logging.DEBUG


def test_annotations_forward_warnings_and_errors(monkeypatch) -> None:
    annotations: list[tuple[str, str]] = []
    monkeypatch.setattr(
        "napi_matrix.logging_utils.core.warning",
        lambda message, *args, **kwargs: annotations.append(("warning", message)),
    )
    monkeypatch.setattr(
        "napi_matrix.logging_utils.core.error",
        lambda message, *args, **kwargs: annotations.append(("error", message)),
    )
    configure_logging(LogOptions(annotations=True))
    logger = logging.getLogger("napi_matrix.test")

    logger.info("Added config for target: x86_64-apple-darwin")
    logger.warning("No config found for target: bogus", extra={"target": "bogus"})
    logger.error("Unsupported targets found: bogus")

    assert annotations == [
        ("warning", "[bogus] No config found for target: bogus"),
        ("error", "Unsupported targets found: bogus"),
    ]


def test_annotations_disabled_by_default() -> None:
    root = configure_logging(LogOptions())
    assert not any(isinstance(handler, AnnotationHandler) for handler in root.handlers)
