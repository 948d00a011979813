"""Position: a board plus the move history needed to undo it."""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import PieceType
from chesslet.core.move import HistoryEntry, Move, MoveOutcome
from chesslet.core.types import row_of, square_name


class Position:
    """Board and per-session history stack with make/unmake.

    The turn is *not* tracked here; handing the move to the other side is the
    caller's job. A history is never shared between two positions.
    """

    __slots__ = ("board", "_history")

    def __init__(self, board: Board | None = None) -> None:
        self.board = board if board is not None else Board.initial()
        self._history: list[HistoryEntry] = []

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> MoveOutcome:
        """Apply *move* and push its undo record.

        The move is assumed to be legal. A pawn arriving on its far rank is
        replaced by a queen; capturing a king ends the game for the mover.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {square_name(move.from_sq)}")

        captured = board[move.to_sq]
        self._history.append(HistoryEntry(move, piece, captured))

        placed = piece
        if (
            piece.piece_type == PieceType.PAWN
            and row_of(move.to_sq) == piece.color.promotion_row
        ):
            placed = piece.promoted()

        board[move.to_sq] = placed
        board[move.from_sq] = None

        winner = None
        if captured is not None and captured.piece_type == PieceType.KING:
            winner = piece.color

        return MoveOutcome(
            move=move,
            moved_piece=piece,
            captured_piece=captured,
            promoted=placed is not piece,
            winner=winner,
        )

    def unmake_move(self) -> HistoryEntry:
        """Revert the most recent move and return its record."""
        entry = self._history.pop()
        self.board[entry.from_sq] = entry.moved_piece
        self.board[entry.to_sq] = entry.captured_piece
        return entry

    def undo(self, count: int = 1) -> bool:
        """Undo up to *count* moves, newest first.

        Returns ``False`` (and changes nothing) when the history is empty.
        """
        if not self._history:
            return False
        for _ in range(min(count, len(self._history))):
            self.unmake_move()
        return True

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._history)

    @property
    def ply_count(self) -> int:
        return len(self._history)

    @property
    def last_entry(self) -> HistoryEntry | None:
        return self._history[-1] if self._history else None

    def copy(self) -> Position:
        """Independent copy (board and history)."""
        p = Position(self.board.copy())
        p._history = self._history.copy()
        return p

    def __repr__(self) -> str:
        return f"Position(ply={self.ply_count})\n{self.board!r}"
