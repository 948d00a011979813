"""High-level game rules: king-capture wins and no-move positions."""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import Color, GameResult, PieceType
from chesslet.core.move import MoveOutcome
from chesslet.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker.

    Product policy: check is not modelled. A game is won by capturing the
    enemy king. A side with no legal moves is declared a draw by the game
    layer; nothing else ends a game.
    """

    @staticmethod
    def has_legal_moves(board: Board, color: Color) -> bool:
        return bool(MoveGenerator(board).generate_legal_moves(color))

    @staticmethod
    def has_king(board: Board, color: Color) -> bool:
        return board.has_piece(color, PieceType.KING)

    @staticmethod
    def result_after(outcome: MoveOutcome, board: Board, next_to_move: Color) -> GameResult:
        """Game result once *outcome* has been applied and the turn passed on."""
        if outcome.winner is not None:
            return GameResult.win_for(outcome.winner)
        if not Rules.has_legal_moves(board, next_to_move):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
