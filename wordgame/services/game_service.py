"""
Game Service

Glue between the adapters and the game core: picks the target word,
owns the live session, translates keys into session operations and
records game events in the log.
"""

import random
from typing import Callable, List, Optional

from flask import current_app

from ..config.game_settings import ANSWER_LENGTH, FALLBACK_WORDS, MAX_ROUNDS
from ..models.events import GameEnded, GameEvent, InvalidWordFlagged, LoadingChanged, RowScored
from ..models.game import GameState, GameStatus
from ..utils.game_logger import game_logger
from ..utils.helpers import is_letter
from .game_session import GameSession
from .word_source import LocalWordSource, RemoteWordSource, WordSource, select_target_word

EventListener = Callable[[GameEvent], None]


class GameService:
    """
    Runs one game at a time.

    Starting a new game replaces the current session. Listeners registered
    with subscribe() receive the events of every session this service
    creates, plus the loading events around target word selection.
    """

    def __init__(self, word_source: WordSource,
                 answer_length: int = ANSWER_LENGTH,
                 max_rounds: int = MAX_ROUNDS,
                 fail_open: bool = True,
                 fallback_words: Optional[List[str]] = None,
                 rng: Optional[random.Random] = None):
        self.word_source = word_source
        self.answer_length = answer_length
        self.max_rounds = max_rounds
        self.fail_open = fail_open
        self.fallback_words = fallback_words if fallback_words is not None else list(FALLBACK_WORDS)
        self.rng = rng
        self.session: Optional[GameSession] = None
        self._listeners: List[EventListener] = []

    @classmethod
    def from_config(cls, config_class) -> "GameService":
        """Builds the service and its word source from a Config class."""
        if config_class.WORD_SOURCE == 'remote':
            source = RemoteWordSource(
                config_class.WORD_API_URL, timeout=config_class.WORD_API_TIMEOUT_SECONDS
            )
        elif config_class.WORD_SOURCE == 'local':
            source = LocalWordSource()
        else:
            raise ValueError(f"Unknown WORD_SOURCE: {config_class.WORD_SOURCE!r}")

        return cls(
            source,
            answer_length=config_class.ANSWER_LENGTH,
            max_rounds=config_class.MAX_ROUNDS,
            fail_open=config_class.VALIDATION_FAIL_OPEN,
        )

    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def _publish(self, event: GameEvent) -> None:
        for listener in self._listeners:
            listener(event)
        self._log_event(event)

    def _log_event(self, event: GameEvent) -> None:
        session = self.session
        if isinstance(event, RowScored):
            game_logger.log_game_event(
                'guess_scored', row=event.row,
                guess=''.join(cell.letter for cell in event.outcomes),
                outcomes=[cell.status.value for cell in event.outcomes]
            )
        elif isinstance(event, InvalidWordFlagged):
            game_logger.log_game_event(
                'invalid_word', row=event.row, guess=session.current_guess if session else None
            )
        elif isinstance(event, GameEnded):
            name = 'game_won' if event.result == GameStatus.WON else 'game_lost'
            game_logger.log_game_event(
                name, rounds_used=session.current_round if session else None,
                target_word=session.target_word if session else None
            )

    def new_game(self) -> GameState:
        """
        Selects a target word and starts a fresh session.

        Returns:
            GameState of the new session
        """
        self._publish(LoadingChanged(is_loading=True))
        try:
            target_word = select_target_word(
                self.word_source,
                answer_length=self.answer_length,
                fallback_words=self.fallback_words,
                rng=self.rng,
            )
        finally:
            self._publish(LoadingChanged(is_loading=False))

        session = GameSession(
            target_word,
            word_source=self.word_source,
            answer_length=self.answer_length,
            max_rounds=self.max_rounds,
            fail_open=self.fail_open,
        )
        session.subscribe(self._publish)
        self.session = session

        game_logger.log_game_event(
            'game_started', answer_length=self.answer_length, max_rounds=self.max_rounds
        )
        return session.snapshot()

    def get_game_state(self) -> Optional[GameState]:
        """Returns the live session state, or None before the first game."""
        if self.session is None:
            return None
        return self.session.snapshot()

    def add_letter(self, letter: str) -> List[GameEvent]:
        if self.session is None:
            return []
        return self.session.add_letter(letter)

    def backspace(self) -> List[GameEvent]:
        if self.session is None:
            return []
        return self.session.backspace()

    def commit(self) -> List[GameEvent]:
        if self.session is None:
            return []
        return self.session.commit()

    def handle_key(self, key: str) -> List[GameEvent]:
        """
        Translates a raw key name into a session operation.

        "Enter" commits, "Backspace" deletes, a single letter is typed and
        anything else is ignored.
        """
        if key == "Enter":
            return self.commit()
        if key == "Backspace":
            return self.backspace()
        if is_letter(key):
            return self.add_letter(key)
        return []


def get_game_service() -> Optional[GameService]:
    """Get the game service attached to the current Flask app."""
    return current_app.extensions.get('wordgame')
