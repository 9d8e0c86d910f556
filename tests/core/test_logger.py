"""Tests for logging setup from settings."""

import sys

import pytest
from loguru import logger

from marathon_trainer.config.settings import Settings
from marathon_trainer.core.logger import setup_logger


@pytest.fixture(autouse=True)
def restore_logger():
    """Drop the sinks added by a test and restore the default stderr sink."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="INFO")


def test_log_file_receives_messages_at_configured_level(tmp_path):
    """Messages at or above log_level reach the file, lower ones do not."""
    log_file = tmp_path / "logs" / "marathon.log"
    config = Settings().model_copy(update={"log_file": str(log_file), "log_level": "WARNING"})

    setup_logger(config)
    logger.info("plan generated")
    logger.warning("race is near")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "race is near" in content
    assert "plan generated" not in content


def test_level_argument_overrides_settings(tmp_path):
    """An explicit level wins over log_level."""
    log_file = tmp_path / "marathon.log"
    config = Settings().model_copy(update={"log_file": str(log_file), "log_level": "ERROR"})

    setup_logger(config, level="DEBUG")
    logger.debug("week 1 allocated")
    logger.remove()

    assert "week 1 allocated" in log_file.read_text(encoding="utf-8")


def test_no_log_file_means_no_file_sink(tmp_path, monkeypatch):
    """Without log_file only the console sink is added."""
    monkeypatch.chdir(tmp_path)
    config = Settings().model_copy(update={"log_file": None})

    setup_logger(config)
    logger.info("console only")

    assert list(tmp_path.iterdir()) == []
