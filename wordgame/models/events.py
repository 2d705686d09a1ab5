"""
Game Event Models

Render-ready events emitted by a game session. Adapters only need these
to draw the board; they never read session internals.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from .game import CellOutcome, GameStatus


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for session events."""
    kind: ClassVar[str] = "event"

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Event fields as a JSON-ready dict."""

    def as_message(self) -> Dict[str, Any]:
        """Payload tagged with the event kind, for HTTP responses."""
        return {"kind": self.kind, **self.to_dict()}


@dataclass(frozen=True)
class CellUpdated(GameEvent):
    """A single cell was typed into (letter) or cleared (None)."""
    kind: ClassVar[str] = "cell_updated"
    row: int
    col: int
    letter: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col, "letter": self.letter}


@dataclass(frozen=True)
class RowScored(GameEvent):
    """A committed row and its per-cell outcomes."""
    kind: ClassVar[str] = "row_scored"
    row: int
    outcomes: Tuple[CellOutcome, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "row": self.row,
            "outcomes": [
                {"letter": cell.letter, "status": cell.status.value}
                for cell in self.outcomes
            ],
        }


@dataclass(frozen=True)
class InvalidWordFlagged(GameEvent):
    """The word source rejected the guess on this row."""
    kind: ClassVar[str] = "invalid_word"
    row: int

    def to_dict(self) -> Dict[str, Any]:
        return {"row": self.row}


@dataclass(frozen=True)
class GameEnded(GameEvent):
    """Terminal transition. target_word is only revealed on a loss."""
    kind: ClassVar[str] = "game_ended"
    result: GameStatus
    target_word: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"result": self.result.value, "target_word": self.target_word}


@dataclass(frozen=True)
class LoadingChanged(GameEvent):
    """A word source round-trip started or finished."""
    kind: ClassVar[str] = "loading_changed"
    is_loading: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"is_loading": self.is_loading}
