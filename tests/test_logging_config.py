"""Tests for logging setup."""

import logging

import pytest

from payment_service.app.core.logging_config import TRACE, resolve_level, setup_logging


@pytest.mark.parametrize(
    "name, expected",
    [
        ("trace", TRACE),
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        ("bogus", logging.INFO),
    ],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_trace_level_name_registered():
    assert logging.getLevelName(TRACE) == "TRACE"


def test_setup_logging_configures_empty_root(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    saved_level = root.level
    logfile = tmp_path / "payments.log"

    setup_logging("trace", str(logfile))
    try:
        assert root.level == TRACE
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
        logging.getLogger("payments.test").log(TRACE, "trace line")
        for handler in root.handlers:
            handler.flush()
        assert "[TRACE] payments.test: trace line" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.setLevel(saved_level)


def test_setup_logging_runs_once(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    monkeypatch.setattr(root, "level", logging.WARNING)

    setup_logging("DEBUG")

    assert root.handlers == [existing]
    assert root.level == logging.WARNING
