"""Tests for settings and logging setup."""

import io
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from exstatus._internal.config import Settings, load_settings
from exstatus._internal.log import configure_logging


def test_defaults_from_empty_environment():
    settings = load_settings({})
    assert settings.persistence_file_path is None
    assert settings.log_level == "WARNING"


def test_settings_from_environment():
    settings = load_settings({
        "EXSTATUS_PERSISTENCE_FILE_PATH": "tmp/examples.txt",
        "EXSTATUS_LOG_LEVEL": "debug",
    })
    assert settings.persistence_file_path == Path("tmp/examples.txt")
    assert settings.log_level == "DEBUG"


def test_blank_values_fall_back_to_defaults():
    settings = load_settings({"EXSTATUS_PERSISTENCE_FILE_PATH": "", "EXSTATUS_LOG_LEVEL": ""})
    assert settings.persistence_file_path is None
    assert settings.log_level == "WARNING"


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("EXSTATUS_PERSISTENCE_FILE_PATH", "state/examples.txt")
    assert load_settings().persistence_file_path == Path("state/examples.txt")


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError, match="Unknown log level"):
        Settings(log_level="chatty")


def test_configure_logging_replaces_handlers():
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)
    logger = configure_logging("INFO", stream=stream)

    assert len(logger.handlers) == 1
    logging.getLogger("exstatus._internal.io.status_file").info("Persisted %d example statuses", 3)
    assert stream.getvalue() == "INFO exstatus._internal.io.status_file: Persisted 3 example statuses\n"
