"""Abstract interfaces for the game layer.

The high-level GameController depends on these ABCs, not on concrete
player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesslet.core.enums import Color

if TYPE_CHECKING:
    from chesslet.core.move import Move
    from chesslet.core.position import Position
    from chesslet.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()  # nothing selected
    PIECE_SELECTED = auto()
    THINKING = auto()  # engine to move
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, position: Position) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via the board).
        For AI this schedules the engine.
        """


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, white: IPlayer | None = None, black: IPlayer | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move (or move pair vs. the engine)."""

    @abstractmethod
    def hint(self) -> Square | None:
        """Suggest a piece to move for the side on turn."""
