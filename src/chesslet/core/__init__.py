"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chesslet.core import Color, MoveGenerator, Position

    pos = Position()
    gen = MoveGenerator(pos.board)
    for move in gen.generate_legal_moves(Color.WHITE):
        print(move)
"""

from chesslet.core.board import Board
from chesslet.core.enums import Color, GameResult, PieceType
from chesslet.core.move import HistoryEntry, Move, MoveOutcome
from chesslet.core.move_generator import (
    MoveGenerator,
    generate_legal_moves,
    is_legal_move,
)
from chesslet.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.rules import Rules
from chesslet.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "HistoryEntry",
    "Move",
    "MoveGenerator",
    "MoveOutcome",
    "Piece",
    "Position",
    "Rules",
    "generate_legal_moves",
    "is_legal_move",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
]
