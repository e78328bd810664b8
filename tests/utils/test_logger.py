"""Tests for logging setup."""

import logging

from e2e_framework.config.env_config import EnvironmentConfig
from e2e_framework.utils.logger import configure_logging, resolve_log_level


def test_explicit_level_wins():
    assert resolve_log_level("warning", EnvironmentConfig()) == logging.WARNING


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert resolve_log_level() == logging.ERROR


def test_ci_suppresses_debug(monkeypatch):
    monkeypatch.setenv("CI", "1")
    assert resolve_log_level("DEBUG") == logging.INFO
    assert resolve_log_level(logging.ERROR) == logging.ERROR


def test_unknown_level_name_falls_back_to_info():
    assert resolve_log_level("chatty", EnvironmentConfig()) == logging.INFO


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        applied = configure_logging("INFO", EnvironmentConfig())
        assert applied == logging.INFO
        assert root.level == logging.INFO
        assert logging.getLogger("faker").level == logging.WARNING
    finally:
        root.setLevel(previous)
