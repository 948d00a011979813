"""Move, history and outcome value objects."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.enums import Color
from chesslet.core.piece import Piece
from chesslet.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from, to) pair. Promotion is implied, never stored."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Undo record pushed by :meth:`Position.make_move`.

    ``moved_piece`` is the piece as it stood *before* the move, so undoing a
    promotion puts the pawn back rather than the queen.
    """

    move: Move
    moved_piece: Piece
    captured_piece: Piece | None

    @property
    def from_sq(self) -> Square:
        return self.move.from_sq

    @property
    def to_sq(self) -> Square:
        return self.move.to_sq


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What happened when a move was applied."""

    move: Move
    moved_piece: Piece
    captured_piece: Piece | None = None
    promoted: bool = False
    winner: Color | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    @property
    def game_over(self) -> bool:
        """True when the move captured the enemy king."""
        return self.winner is not None
