import pytest

from wordgame.config import Config
from wordgame.models.events import CellUpdated, GameEnded, LoadingChanged, RowScored
from wordgame.models.game import GameStatus
from wordgame.services.game_service import GameService
from wordgame.services.word_source import LocalWordSource, RemoteWordSource


def test_operations_before_first_game_are_noops(game_service) -> None:
    assert game_service.get_game_state() is None
    assert game_service.handle_key("A") == []
    assert game_service.backspace() == []
    assert game_service.commit() == []


def test_new_game_uses_source_word_and_publishes_loading(game_service) -> None:
    received = []
    game_service.subscribe(received.append)

    state = game_service.new_game()

    assert received == [LoadingChanged(is_loading=True), LoadingChanged(is_loading=False)]
    assert game_service.session.target_word == "CRANE"
    assert state.current_round == 0
    assert state.answer is None
    assert state.max_rounds == 6
    assert state.answer_length == 5


def test_new_game_falls_back_when_source_is_down(stub_source_cls) -> None:
    service = GameService(stub_source_cls(fail_target=True), fallback_words=["GHOST"])

    service.new_game()

    assert service.session.target_word == "GHOST"


def test_new_game_replaces_current_session(game_service) -> None:
    game_service.new_game()
    game_service.handle_key("C")
    first = game_service.session

    state = game_service.new_game()

    assert game_service.session is not first
    assert state.current_guess == ""


def test_handle_key_translates_keys(game_service) -> None:
    game_service.new_game()

    assert game_service.handle_key("c") == [CellUpdated(row=0, col=0, letter="C")]
    assert game_service.handle_key("Backspace") == [CellUpdated(row=0, col=0, letter=None)]
    assert game_service.handle_key("Shift") == []
    assert game_service.handle_key("Enter") == []

    for key in "RANCH":
        game_service.handle_key(key)
    events = game_service.handle_key("Enter")

    assert isinstance(events[-1], RowScored)
    assert game_service.get_game_state().guesses == ["RANCH"]


def test_service_forwards_session_events_to_subscribers(game_service) -> None:
    received = []
    game_service.subscribe(received.append)
    game_service.new_game()

    for key in "CRANE":
        game_service.handle_key(key)
    game_service.handle_key("Enter")

    assert received[-1] == GameEnded(result=GameStatus.WON)
    assert game_service.get_game_state().won is True


def test_from_config_builds_local_source() -> None:
    class LocalConfig(Config):
        WORD_SOURCE = "local"
        MAX_ROUNDS = 4
        VALIDATION_FAIL_OPEN = False

    service = GameService.from_config(LocalConfig)

    assert isinstance(service.word_source, LocalWordSource)
    assert service.max_rounds == 4
    assert service.fail_open is False


def test_from_config_builds_remote_source() -> None:
    class RemoteConfig(Config):
        WORD_SOURCE = "remote"
        WORD_API_URL = "https://words.example"
        WORD_API_TIMEOUT_SECONDS = 1.5

    service = GameService.from_config(RemoteConfig)

    assert isinstance(service.word_source, RemoteWordSource)
    assert service.word_source.base_url == "https://words.example"
    assert service.word_source.timeout == 1.5


def test_from_config_rejects_unknown_source() -> None:
    class BadConfig(Config):
        WORD_SOURCE = "carrier-pigeon"

    with pytest.raises(ValueError):
        GameService.from_config(BadConfig)
