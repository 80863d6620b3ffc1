import logging

import pytest

from watchlist import RuntimeSettings, load_settings
from watchlist.utils import setup_logger

ENV_VARS = ("WATCHLIST_LOG_LEVEL", "WATCHLIST_LOGGER_NAME")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the original state afterwards,
    # including anything load_dotenv() writes during the test
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    yield


def test_defaults(clean_env, tmp_path):
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings == RuntimeSettings()
    assert settings.to_dict() == {"log_level": "INFO", "logger_name": "watchlist"}


def test_reads_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("WATCHLIST_LOG_LEVEL=debug\nWATCHLIST_LOGGER_NAME=from_file\n")

    settings = load_settings(str(env_file))
    assert settings.log_level == "DEBUG"
    assert settings.logger_name == "from_file"


def test_environment_wins_over_env_file(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("WATCHLIST_LOG_LEVEL", "WARNING")
    env_file = tmp_path / ".env"
    env_file.write_text("WATCHLIST_LOG_LEVEL=DEBUG\n")

    assert load_settings(str(env_file)).log_level == "WARNING"


def test_setup_logger_does_not_duplicate_handlers(clean_env):
    logger = setup_logger("watchlist.test_logger", "DEBUG")
    again = setup_logger("watchlist.test_logger", "DEBUG")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_setup_logger_with_explicit_args_skips_env_file(monkeypatch):
    def fail():
        raise AssertionError("load_settings() should not be called")

    monkeypatch.setattr("watchlist.utils.logger.load_settings", fail)
    logger = setup_logger("watchlist.test_explicit", "WARNING")
    assert logger.level == logging.WARNING


def test_setup_logger_falls_back_to_env(clean_env, monkeypatch):
    monkeypatch.setenv("WATCHLIST_LOG_LEVEL", "error")
    logger = setup_logger("watchlist.test_env_level")
    assert logger.level == logging.ERROR
