import logging

import pytest

from config import DEFAULT_CONFIG, AppConfig, ConfigError


def test_defaults():
    assert DEFAULT_CONFIG.default_length == 16
    assert DEFAULT_CONFIG.min_length == 4
    assert DEFAULT_CONFIG.max_length == 64
    assert DEFAULT_CONFIG.history_limit == 50
    assert DEFAULT_CONFIG.clipboard_clear_seconds == 15
    assert DEFAULT_CONFIG.appearance_mode == "dark"
    assert DEFAULT_CONFIG.log_level_value == logging.INFO
    assert DEFAULT_CONFIG.log_file is None


def test_from_empty_env_gives_defaults():
    assert AppConfig.from_env({}) == DEFAULT_CONFIG


def test_env_overrides():
    config = AppConfig.from_env({
        "PASSFORGE_DEFAULT_LENGTH": "24",
        "PASSFORGE_MAX_LENGTH": "128",
        "PASSFORGE_HISTORY_LIMIT": " 10 ",
        "PASSFORGE_CLIPBOARD_CLEAR_SECONDS": "0",
        "PASSFORGE_APPEARANCE_MODE": "Light",
        "PASSFORGE_LOG_LEVEL": "debug",
        "PASSFORGE_LOG_FILE": "/tmp/passforge.log",
        "UNRELATED": "ignored",
    })
    assert config.default_length == 24
    assert config.max_length == 128
    assert config.history_limit == 10
    assert config.clipboard_clear_seconds == 0
    assert config.appearance_mode == "light"
    assert config.log_level == "DEBUG"
    assert config.log_level_value == logging.DEBUG
    assert config.log_file == "/tmp/passforge.log"


def test_blank_values_are_ignored():
    assert AppConfig.from_env({"PASSFORGE_DEFAULT_LENGTH": "  "}) == DEFAULT_CONFIG


def test_non_integer_length():
    with pytest.raises(ConfigError, match="PASSFORGE_DEFAULT_LENGTH"):
        AppConfig.from_env({"PASSFORGE_DEFAULT_LENGTH": "sixteen"})


@pytest.mark.parametrize("env", [
    {"PASSFORGE_DEFAULT_LENGTH": "2"},            # below min_length
    {"PASSFORGE_DEFAULT_LENGTH": "100"},          # above max_length
    {"PASSFORGE_MIN_LENGTH": "0"},
    {"PASSFORGE_HISTORY_LIMIT": "0"},
    {"PASSFORGE_CLIPBOARD_CLEAR_SECONDS": "-1"},
    {"PASSFORGE_APPEARANCE_MODE": "sepia"},
    {"PASSFORGE_LOG_LEVEL": "LOUD"},
])
def test_invalid_values(env):
    with pytest.raises(ConfigError):
        AppConfig.from_env(env)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)
