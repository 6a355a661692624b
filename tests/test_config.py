"""
Tests for configuration loading.

Run with: python -m pytest tests/test_config.py
"""

import logging

import pytest

from logic.config import (
    DEFAULT_PORT,
    get_default_config,
    load_config,
    sanitise_port,
)
from main import create_app, setup_logging


def test_defaults():
    config = load_config({})
    assert config == get_default_config()
    assert config["port"] == DEFAULT_PORT == 3000
    assert config["host"] == "0.0.0.0"
    assert config["log_level"] == "INFO"


def test_environment_overrides():
    config = load_config({"HOST": "127.0.0.1", "PORT": "8080", "LOG_LEVEL": "debug"})
    assert config["host"] == "127.0.0.1"
    assert config["port"] == 8080
    assert config["log_level"] == "DEBUG"


def test_empty_values_use_defaults():
    config = load_config({"PORT": "", "LOG_LEVEL": ""})
    assert config["port"] == 3000
    assert config["log_level"] == "INFO"


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("PORT", "5050")
    assert load_config()["port"] == 5050


@pytest.mark.parametrize("value", ["abc", "0", "70000", "-1", True])
def test_invalid_port(value):
    with pytest.raises(ValueError):
        sanitise_port(value)


def test_invalid_log_level():
    with pytest.raises(ValueError):
        load_config({"LOG_LEVEL": "LOUD"})


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("verbose")


def test_setup_logging_accepts_lowercase():
    setup_logging("warning")
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_replaces_existing_handlers():
    root = logging.getLogger()
    stale = logging.NullHandler()
    root.addHandler(stale)

    setup_logging("ERROR")

    assert stale not in root.handlers
    assert root.level == logging.ERROR


def test_create_app_applies_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    create_app()
    assert logging.getLogger().level == logging.DEBUG


def test_create_app_rejects_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        create_app()
