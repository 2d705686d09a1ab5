"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter evaluation outcome."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    UNUSED = "unused"


class GameStatus(Enum):
    """Lifecycle of a single game session."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class CellOutcome:
    """One scored cell: the guessed letter and how it matched."""
    letter: str
    status: LetterStatus


@dataclass(frozen=True)
class RoundResult:
    """Scored row, one CellOutcome per position of the guess."""
    outcomes: Tuple[CellOutcome, ...]

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self):
        return iter(self.outcomes)

    def __getitem__(self, index: int) -> CellOutcome:
        return self.outcomes[index]

    @property
    def guess(self) -> str:
        return "".join(cell.letter for cell in self.outcomes)

    @property
    def statuses(self) -> List[LetterStatus]:
        return [cell.status for cell in self.outcomes]

    @property
    def is_win(self) -> bool:
        return all(cell.status == LetterStatus.CORRECT for cell in self.outcomes)

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Letter/status pairs as plain strings for JSON serialization."""
        return [(cell.letter, cell.status.value) for cell in self.outcomes]


@dataclass
class GameState:
    """Serializable snapshot of a game session."""
    current_round: int
    max_rounds: int
    answer_length: int
    current_guess: str
    status: str
    pending: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS.value

    @property
    def won(self) -> bool:
        return self.status == GameStatus.WON.value
