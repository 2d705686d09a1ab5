"""
Game Session

Turn-based state machine for a single game: the letter buffer for the
current row, committed rounds, and the terminal status.
"""

from typing import Callable, Dict, List, Optional

from ..config.game_settings import ANSWER_LENGTH, MAX_ROUNDS
from ..exceptions import InvalidInputError, WordSourceError
from ..models.events import (
    CellUpdated,
    GameEnded,
    GameEvent,
    InvalidWordFlagged,
    LoadingChanged,
    RowScored,
)
from ..models.game import GameState, GameStatus, LetterStatus, RoundResult
from ..utils.game_logger import game_logger
from ..utils.helpers import is_letter
from .scoring import merge_letter_status, score
from .word_source import WordSource

EventListener = Callable[[GameEvent], None]


class GameSession:
    """
    One game against one target word.

    Input operations never raise for bad input; they return the events
    they produced, which is an empty list when the call was ignored.
    While a commit is waiting on the word source the session is
    `pending` and every operation is ignored.

    Args:
        target_word: The secret word, answer_length letters
        word_source: Dictionary used to accept or reject guesses;
            None accepts every complete guess
        answer_length: Letters per row
        max_rounds: Rows before the game is lost
        fail_open: Accept a guess when the word source raises
            WordSourceError; when False the guess is flagged invalid
    """

    def __init__(self, target_word: str,
                 word_source: Optional[WordSource] = None,
                 answer_length: int = ANSWER_LENGTH,
                 max_rounds: int = MAX_ROUNDS,
                 fail_open: bool = True):
        if answer_length <= 0:
            raise InvalidInputError("answer_length must be positive")
        if max_rounds <= 0:
            raise InvalidInputError("max_rounds must be positive")
        if not isinstance(target_word, str) or len(target_word) != answer_length:
            raise InvalidInputError(
                f"Target word must be exactly {answer_length} letters, got {target_word!r}"
            )
        if not (target_word.isascii() and target_word.isalpha()):
            raise InvalidInputError(f"Target word must be alphabetic, got {target_word!r}")

        self.target_word = target_word.upper()
        self.word_source = word_source
        self.answer_length = answer_length
        self.max_rounds = max_rounds
        self.fail_open = fail_open

        self.current_round = 0
        self.current_guess = ""
        self.history: List[RoundResult] = []
        self.status = GameStatus.IN_PROGRESS
        self.pending = False

        self._listeners: List[EventListener] = []

    @property
    def game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def subscribe(self, listener: EventListener) -> None:
        """Register a callable that receives every emitted event in order."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, events: List[GameEvent], event: GameEvent) -> None:
        events.append(event)
        for listener in self._listeners:
            listener(event)

    def _accepting_input(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS and not self.pending

    def add_letter(self, ch: str) -> List[GameEvent]:
        """Type a letter; a full row has its last letter overwritten."""
        events: List[GameEvent] = []
        if not self._accepting_input() or not is_letter(ch):
            return events

        letter = ch.upper()
        if len(self.current_guess) < self.answer_length:
            self.current_guess += letter
        else:
            self.current_guess = self.current_guess[:-1] + letter

        col = len(self.current_guess) - 1
        self._emit(events, CellUpdated(row=self.current_round, col=col, letter=letter))
        return events

    def backspace(self) -> List[GameEvent]:
        """Remove the last typed letter of the current row."""
        events: List[GameEvent] = []
        if not self._accepting_input() or not self.current_guess:
            return events

        col = len(self.current_guess) - 1
        self.current_guess = self.current_guess[:col]
        self._emit(events, CellUpdated(row=self.current_round, col=col, letter=None))
        return events

    def _is_accepted(self, guess: str) -> bool:
        if self.word_source is None:
            return True
        try:
            return bool(self.word_source.validate(guess))
        except WordSourceError as e:
            game_logger.log_warning(
                'validation_unavailable', guess=guess, fail_open=self.fail_open, reason=str(e)
            )
            return self.fail_open

    def commit(self) -> List[GameEvent]:
        """
        Submit the current row.

        The guess is checked with the word source first. A rejected word
        leaves the row editable; an accepted one is scored, recorded and
        may end the game.
        """
        events: List[GameEvent] = []
        if not self._accepting_input() or len(self.current_guess) != self.answer_length:
            return events

        guess = self.current_guess
        row = self.current_round

        self.pending = True
        try:
            self._emit(events, LoadingChanged(is_loading=True))
            accepted = self._is_accepted(guess)
        finally:
            self.pending = False
            self._emit(events, LoadingChanged(is_loading=False))

        if not accepted:
            self._emit(events, InvalidWordFlagged(row=row))
            return events

        result = score(guess, self.target_word)
        self.history.append(result)
        self.current_round += 1
        self.current_guess = ""

        if result.is_win:
            self.status = GameStatus.WON
        elif self.current_round == self.max_rounds:
            self.status = GameStatus.LOST

        self._emit(events, RowScored(row=row, outcomes=result.outcomes))

        if self.status == GameStatus.WON:
            self._emit(events, GameEnded(result=GameStatus.WON))
        elif self.status == GameStatus.LOST:
            self._emit(events, GameEnded(result=GameStatus.LOST, target_word=self.target_word))

        return events

    def letter_status(self) -> Dict[str, str]:
        """Best status seen so far for each letter A-Z."""
        statuses = {chr(code): LetterStatus.UNUSED for code in range(ord('A'), ord('Z') + 1)}
        for result in self.history:
            for cell in result:
                statuses[cell.letter] = merge_letter_status(statuses[cell.letter], cell.status)
        return {letter: status.value for letter, status in statuses.items()}

    def snapshot(self) -> GameState:
        """Returns the current state without revealing the answer mid-game."""
        return GameState(
            current_round=self.current_round,
            max_rounds=self.max_rounds,
            answer_length=self.answer_length,
            current_guess=self.current_guess,
            status=self.status.value,
            pending=self.pending,
            guesses=[result.guess for result in self.history],
            guess_results=[result.to_pairs() for result in self.history],
            letter_status=self.letter_status(),
            answer=self.target_word if self.game_over else None,
        )
