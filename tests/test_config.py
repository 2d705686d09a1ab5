import importlib

import pytest

from wordgame.config import app_config
from wordgame.config.game_settings import (
    ANSWER_LENGTH,
    FALLBACK_WORDS,
    MAX_ROUNDS,
    WORD_LIST,
    is_well_formed_word,
    validate_word_list_integrity,
)


@pytest.fixture
def reload_app_config(monkeypatch):
    yield lambda: importlib.reload(app_config)
    monkeypatch.undo()
    importlib.reload(app_config)


def test_config_reads_expected_env(monkeypatch, reload_app_config) -> None:
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("MAX_ROUNDS", "8")
    monkeypatch.setenv("WORD_SOURCE", "local")
    monkeypatch.setenv("WORD_API_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("VALIDATION_FAIL_OPEN", "false")

    module = reload_app_config()

    assert module.Config.PORT == 9000
    assert module.Config.MAX_ROUNDS == 8
    assert module.Config.WORD_SOURCE == "local"
    assert module.Config.WORD_API_TIMEOUT_SECONDS == 2.5
    assert module.Config.VALIDATION_FAIL_OPEN is False


def test_config_applies_defaults(monkeypatch, reload_app_config) -> None:
    for name in ("PORT", "ANSWER_LENGTH", "MAX_ROUNDS", "WORD_SOURCE", "VALIDATION_FAIL_OPEN"):
        monkeypatch.delenv(name, raising=False)

    module = reload_app_config()

    assert module.Config.PORT == 5000
    assert module.Config.ANSWER_LENGTH == 5
    assert module.Config.MAX_ROUNDS == 6
    assert module.Config.WORD_SOURCE == "remote"
    assert module.Config.VALIDATION_FAIL_OPEN is True


def test_config_mapping_defaults_to_development() -> None:
    assert app_config.config["default"] is app_config.DevelopmentConfig
    assert app_config.TestingConfig.WORD_SOURCE == "local"
    assert app_config.TestingConfig.LOG_DIR is None


def test_game_constants() -> None:
    assert ANSWER_LENGTH == 5
    assert MAX_ROUNDS == 6
    assert all(is_well_formed_word(word) for word in FALLBACK_WORDS)


def test_bundled_word_list_passes_integrity_check() -> None:
    assert validate_word_list_integrity() is True
    assert set(FALLBACK_WORDS) <= set(WORD_LIST)


@pytest.mark.parametrize(
    "words",
    [
        [],
        ["CRANE", "CRANE"],
        ["CRANE", "CRAN"],
        ["CRANE", "crane"],
        ["CR4NE"],
    ],
)
def test_word_list_integrity_rejects_bad_lists(words) -> None:
    with pytest.raises(ValueError):
        validate_word_list_integrity(words)
