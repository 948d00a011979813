"""Tests for Player implementations."""

import random

from chesslet.core.enums import Color
from chesslet.core.move import Move
from chesslet.core.notation import board_from_fen
from chesslet.core.position import Position
from chesslet.core.types import E1, E8
from chesslet.engine import Difficulty, MinimaxEngine
from chesslet.game.player import AIPlayer, HumanPlayer


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Color.WHITE, "Alice")
        assert p.color == Color.WHITE
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_name(self) -> None:
        p = HumanPlayer(Color.BLACK)
        assert "black" in p.name.lower()

    def test_request_move_noop(self) -> None:
        p = HumanPlayer(Color.WHITE)
        p.request_move(Position())  # should not raise


class TestAIPlayer:
    def test_properties(self) -> None:
        p = AIPlayer(Color.BLACK)
        assert p.color == Color.BLACK
        assert p.is_human is False
        assert p.difficulty == Difficulty.MEDIUM

    def test_default_name_follows_difficulty(self) -> None:
        p = AIPlayer(Color.BLACK, difficulty=Difficulty.EASY)
        assert p.name == "Engine (Easy)"
        p.difficulty = Difficulty.HARD
        assert p.name == "Engine (Hard)"

    def test_explicit_name(self) -> None:
        assert AIPlayer(Color.WHITE, name="Bot").name == "Bot"

    def test_request_move_calls_back(self) -> None:
        seen: list[Position] = []
        p = AIPlayer(Color.BLACK, on_request_move=seen.append)
        pos = Position()
        p.request_move(pos)
        assert seen == [pos]

    def test_request_move_without_callback(self) -> None:
        AIPlayer(Color.WHITE).request_move(Position())  # should not raise

    def test_choose_move_uses_own_color_and_difficulty(self) -> None:
        p = AIPlayer(Color.WHITE, MinimaxEngine(random.Random(1)), Difficulty.HARD)
        pos = Position(board_from_fen("4k3/8/8/8/8/8/8/4Q2K"))

        result = p.choose_move(pos)

        assert result.best_move == Move(E1, E8)
        assert result.depth == 3

    def test_choose_move_without_moves(self) -> None:
        p = AIPlayer(Color.WHITE, MinimaxEngine(random.Random(1)))
        assert p.choose_move(Position(board_from_fen("4k3/8/8/8/8/8/8/8"))).best_move is None
