"""Placement-only FEN parsing and serialisation."""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.piece import Piece
from chesslet.core.types import make_square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(fen: str) -> Board:
    """Build a board from the placement field of a FEN string.

    Only the first space-separated field is read; side to move, castling and
    the clocks carry no meaning for this rule set.
    """
    placement = fen.split()[0] if fen.strip() else ""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"FEN placement must have 8 ranks, got {len(ranks)}")

    board = Board()
    for row, rank_str in enumerate(ranks):
        col = 0
        for ch in rank_str:
            if ch.isdigit():
                col += int(ch)
            else:
                if col >= 8:
                    raise ValueError(f"Too many squares in rank {8 - row}: {rank_str!r}")
                board[make_square(row, col)] = Piece.from_char(ch)
                col += 1
        if col != 8:
            raise ValueError(f"Rank {8 - row} does not cover 8 squares: {rank_str!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise *board* as a FEN placement field."""
    ranks: list[str] = []
    for row in range(8):
        parts: list[str] = []
        empty = 0
        for col in range(8):
            piece = board.at(row, col)
            if piece is None:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            parts.append(str(piece))
        if empty:
            parts.append(str(empty))
        ranks.append("".join(parts))
    return "/".join(ranks)
