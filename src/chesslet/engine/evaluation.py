"""Static position evaluation: material, piece-square tables, mobility."""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType
from chesslet.core.types import col_of, row_of

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 20_000,
}

# Flat per-piece stand-in for mobility; deliberately not a move count.
MOBILITY_WEIGHTS: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 4,
    PieceType.BISHOP: 4,
    PieceType.ROOK: 4,
    PieceType.QUEEN: 8,
    PieceType.KING: 1,
}
MOBILITY_FACTOR = 2

Table = tuple[tuple[int, ...], ...]

# Tables are laid out from white's side: row 0 is the far (promotion) rank.
_PAWN_TABLE: Table = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (50, 50, 50, 50, 50, 50, 50, 50),
    (10, 10, 20, 30, 30, 20, 10, 10),
    (5, 5, 10, 25, 25, 10, 5, 5),
    (0, 0, 0, 20, 20, 0, 0, 0),
    (5, -5, -10, 0, 0, -10, -5, 5),
    (5, 10, 10, -20, -20, 10, 10, 5),
    (0, 0, 0, 0, 0, 0, 0, 0),
)

_KNIGHT_TABLE: Table = (
    (-50, -40, -30, -30, -30, -30, -40, -50),
    (-40, -20, 0, 0, 0, 0, -20, -40),
    (-30, 0, 10, 15, 15, 10, 0, -30),
    (-30, 5, 15, 20, 20, 15, 5, -30),
    (-30, 0, 15, 20, 20, 15, 0, -30),
    (-30, 5, 10, 15, 15, 10, 5, -30),
    (-40, -20, 0, 5, 5, 0, -20, -40),
    (-50, -40, -30, -30, -30, -30, -40, -50),
)

_BISHOP_TABLE: Table = (
    (-20, -10, -10, -10, -10, -10, -10, -20),
    (-10, 0, 0, 0, 0, 0, 0, -10),
    (-10, 0, 5, 10, 10, 5, 0, -10),
    (-10, 5, 5, 10, 10, 5, 5, -10),
    (-10, 0, 10, 10, 10, 10, 0, -10),
    (-10, 10, 10, 10, 10, 10, 10, -10),
    (-10, 5, 0, 0, 0, 0, 5, -10),
    (-20, -10, -10, -10, -10, -10, -10, -20),
)

_ROOK_TABLE: Table = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (5, 10, 10, 10, 10, 10, 10, 5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (0, 0, 0, 5, 5, 0, 0, 0),
)

_QUEEN_TABLE: Table = (
    (-20, -10, -10, -5, -5, -10, -10, -20),
    (-10, 0, 0, 0, 0, 0, 0, -10),
    (-10, 0, 5, 5, 5, 5, 0, -10),
    (-5, 0, 5, 5, 5, 5, 0, -5),
    (0, 0, 5, 5, 5, 5, 0, -5),
    (-10, 5, 5, 5, 5, 5, 0, -10),
    (-10, 0, 5, 0, 0, 0, 0, -10),
    (-20, -10, -10, -5, -5, -10, -10, -20),
)

_KING_TABLE: Table = (
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-20, -30, -30, -40, -40, -30, -30, -20),
    (-10, -20, -20, -20, -20, -20, -20, -10),
    (20, 20, 0, 0, 0, 0, 20, 20),
    (20, 30, 10, 0, 0, 10, 30, 20),
)

PIECE_SQUARE_TABLES: dict[PieceType, Table] = {
    PieceType.PAWN: _PAWN_TABLE,
    PieceType.KNIGHT: _KNIGHT_TABLE,
    PieceType.BISHOP: _BISHOP_TABLE,
    PieceType.ROOK: _ROOK_TABLE,
    PieceType.QUEEN: _QUEEN_TABLE,
    PieceType.KING: _KING_TABLE,
}


def piece_square_bonus(piece_type: PieceType, color: Color, row: int, col: int) -> int:
    """Positional bonus; black looks the table up with the row mirrored."""
    table_row = row if color == Color.WHITE else 7 - row
    return PIECE_SQUARE_TABLES[piece_type][table_row][col]


def evaluate(board: Board, perspective: Color) -> int:
    """Score *board* in centipawns; positive favours *perspective*.

    Pure function: the board is only read.
    """
    totals = [0, 0]
    mobility = [0, 0]

    for sq, piece in board.occupied():
        idx = int(piece.color)
        totals[idx] += PIECE_VALUES[piece.piece_type] + piece_square_bonus(
            piece.piece_type, piece.color, row_of(sq), col_of(sq)
        )
        mobility[idx] += MOBILITY_WEIGHTS[piece.piece_type]

    white = totals[Color.WHITE] + mobility[Color.WHITE] * MOBILITY_FACTOR
    black = totals[Color.BLACK] + mobility[Color.BLACK] * MOBILITY_FACTOR
    net = white - black
    return net if perspective == Color.WHITE else -net
