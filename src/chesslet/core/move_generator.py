"""Pseudo-legal move validation and enumeration.

There is no notion of check: a king may step into attack, and a game ends
only when a king is actually captured.
"""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Move
from chesslet.core.piece import Piece
from chesslet.core.types import Square, col_of, make_square, row_of


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class MoveGenerator:
    """Validates and enumerates moves on a :class:`Board`.

    The generator only reads the board; it never mutates it.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the piece on *from_sq* may move to *to_sq*."""
        board = self._board
        piece = board[from_sq]
        if piece is None:
            return False
        if from_sq == to_sq:
            return False
        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return False

        d_row = row_of(to_sq) - row_of(from_sq)
        d_col = col_of(to_sq) - col_of(from_sq)
        abs_row = abs(d_row)
        abs_col = abs(d_col)

        match piece.piece_type:
            case PieceType.KNIGHT:
                return (abs_row, abs_col) in ((1, 2), (2, 1))
            case PieceType.KING:
                return abs_row <= 1 and abs_col <= 1
            case PieceType.ROOK:
                return (d_row == 0 or d_col == 0) and self.is_path_clear(from_sq, to_sq)
            case PieceType.BISHOP:
                return abs_row == abs_col and self.is_path_clear(from_sq, to_sq)
            case PieceType.QUEEN:
                straight = d_row == 0 or d_col == 0
                return (straight or abs_row == abs_col) and self.is_path_clear(
                    from_sq, to_sq
                )
            case PieceType.PAWN:
                return self._is_legal_pawn_move(piece, from_sq, d_row, d_col, target)
        return False

    def is_path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """True if every square strictly between the endpoints is empty.

        Walks unit steps along the line; callers guarantee the endpoints share
        a rank, file or diagonal.
        """
        row_step = _sign(row_of(to_sq) - row_of(from_sq))
        col_step = _sign(col_of(to_sq) - col_of(from_sq))
        row = row_of(from_sq) + row_step
        col = col_of(from_sq) + col_step
        target_row = row_of(to_sq)
        target_col = col_of(to_sq)

        while row != target_row or col != target_col:
            if self._board[make_square(row, col)] is not None:
                return False
            row += row_step
            col += col_step
        return True

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """Every legal move for *color*.

        Sources and destinations are both scanned row-major; search relies on
        this order to break ties.
        """
        moves: list[Move] = []
        append = moves.append
        for from_sq in self._board.all_pieces(color):
            for to_sq in range(64):
                if self.is_legal_move(from_sq, to_sq):
                    append(Move(from_sq, to_sq))
        return moves

    def legal_targets(self, from_sq: Square) -> list[Square]:
        """Destinations reachable from *from_sq* (for highlighting)."""
        return [to_sq for to_sq in range(64) if self.is_legal_move(from_sq, to_sq)]

    def capture_moves(self, moves: list[Move]) -> list[Move]:
        """The subset of *moves* whose destination is occupied."""
        board = self._board
        return [m for m in moves if board[m.to_sq] is not None]

    # -- Piece helpers --------------------------------------------------------

    def _is_legal_pawn_move(
        self,
        pawn: Piece,
        from_sq: Square,
        d_row: int,
        d_col: int,
        target: Piece | None,
    ) -> bool:
        direction = pawn.color.pawn_direction

        if d_col == 0:
            if target is not None:
                return False
            if d_row == direction:
                return True
            if row_of(from_sq) == pawn.color.pawn_start_row and d_row == 2 * direction:
                middle = make_square(row_of(from_sq) + direction, col_of(from_sq))
                return self._board[middle] is None
            return False

        # Diagonal capture only; no en passant.
        return abs(d_col) == 1 and d_row == direction and target is not None


def is_legal_move(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Module-level shortcut for :meth:`MoveGenerator.is_legal_move`."""
    return MoveGenerator(board).is_legal_move(from_sq, to_sq)


def generate_legal_moves(board: Board, color: Color) -> list[Move]:
    """Module-level shortcut for :meth:`MoveGenerator.generate_legal_moves`."""
    return MoveGenerator(board).generate_legal_moves(color)
