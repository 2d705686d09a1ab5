import pytest

from wordgame import create_app
from wordgame.config import TestingConfig
from wordgame.exceptions import WordSourceError
from wordgame.services.game_service import GameService


class StubWordSource:
    """In-memory word source with switchable failures."""

    def __init__(self, target="CRANE", accepted=None, fail_target=False, fail_validate=False):
        self.target = target
        self.accepted = accepted
        self.fail_target = fail_target
        self.fail_validate = fail_validate
        self.validated = []

    def get_target_word(self) -> str:
        if self.fail_target:
            raise WordSourceError("word service down")
        return self.target

    def validate(self, word: str) -> bool:
        self.validated.append(word)
        if self.fail_validate:
            raise WordSourceError("word service down")
        return self.accepted is None or word in self.accepted


@pytest.fixture
def stub_source_cls():
    return StubWordSource


@pytest.fixture
def word_source() -> StubWordSource:
    return StubWordSource(target="CRANE", accepted={"CRANE", "REACT", "RANCH", "GHOST", "TRAIN", "PLACE"})


@pytest.fixture
def game_service(word_source) -> GameService:
    return GameService(word_source)


@pytest.fixture
def app_and_socketio(game_service):
    return create_app(TestingConfig, game_service=game_service)


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()
