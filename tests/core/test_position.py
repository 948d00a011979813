"""Tests for Position make/unmake and history."""

import pytest

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Move
from chesslet.core.notation import board_from_fen
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.types import A1, A2, A7, A8, D5, D7, E2, E4, E8, H1, H2, make_square

WP = Piece(Color.WHITE, PieceType.PAWN)
BP = Piece(Color.BLACK, PieceType.PAWN)


class TestMakeMove:
    def test_relocates_piece(self) -> None:
        pos = Position()
        outcome = pos.make_move(Move(E2, E4))
        assert pos.board[E4] == WP
        assert pos.board[E2] is None
        assert outcome.moved_piece == WP
        assert not outcome.is_capture
        assert not outcome.game_over
        assert pos.ply_count == 1

    def test_capture_recorded(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        pos.make_move(Move(D7, D5))
        outcome = pos.make_move(Move(E4, D5))
        assert outcome.captured_piece == BP
        assert pos.last_entry is not None
        assert pos.last_entry.captured_piece == BP

    def test_king_capture_signals_winner(self) -> None:
        pos = Position(board_from_fen("4k3/8/8/8/8/8/8/4R2K"))
        outcome = pos.make_move(Move(make_square(7, 4), E8))
        assert outcome.game_over
        assert outcome.winner == Color.WHITE
        assert outcome.captured_piece == Piece(Color.BLACK, PieceType.KING)

    def test_empty_origin_raises(self) -> None:
        pos = Position()
        with pytest.raises(ValueError):
            pos.make_move(Move(E4, make_square(3, 4)))

    def test_turn_is_not_tracked(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        # Same colour may move again; alternation belongs to the caller.
        pos.make_move(Move(E4, make_square(3, 4)))
        assert pos.board[make_square(3, 4)] == WP


class TestPromotion:
    def test_white_pawn_becomes_queen(self) -> None:
        board = Board()
        board[A7] = WP
        pos = Position(board)
        outcome = pos.make_move(Move(A7, A8))
        assert outcome.promoted
        assert pos.board[A8] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_black_pawn_becomes_queen(self) -> None:
        board = Board()
        board[H2] = BP
        pos = Position(board)
        pos.make_move(Move(H2, H1))
        assert pos.board[H1] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_capture_promotion(self) -> None:
        board = Board()
        board[A2] = BP
        board[make_square(7, 1)] = Piece(Color.WHITE, PieceType.KNIGHT)
        pos = Position(board)
        outcome = pos.make_move(Move(A2, make_square(7, 1)))
        assert outcome.promoted and outcome.is_capture
        assert pos.board[make_square(7, 1)] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_non_pawn_never_promotes(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.ROOK)
        pos = Position(board)
        outcome = pos.make_move(Move(A1, A8))
        assert not outcome.promoted
        assert pos.board[A8] == Piece(Color.WHITE, PieceType.ROOK)

    def test_undo_restores_pawn(self) -> None:
        board = Board()
        board[A7] = WP
        board[make_square(0, 1)] = Piece(Color.BLACK, PieceType.ROOK)
        before = board.copy()
        pos = Position(board)

        pos.make_move(Move(A7, make_square(0, 1)))
        assert pos.undo()

        assert pos.board == before
        assert pos.board[A7] == WP
        assert pos.ply_count == 0


class TestUndo:
    def test_empty_history(self) -> None:
        pos = Position()
        before = pos.board.copy()
        assert not pos.undo()
        assert pos.board == before

    def test_undo_two_plies(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        pos.make_move(Move(D7, D5))
        assert pos.undo(2)
        assert pos.board == Board.initial()
        assert pos.ply_count == 0

    def test_undo_more_than_available(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        assert pos.undo(5)
        assert pos.board == Board.initial()

    def test_round_trip_capture(self) -> None:
        pos = Position()
        for move in (Move(E2, E4), Move(D7, D5), Move(E4, D5)):
            pos.make_move(move)
        snapshot = pos.board.copy()
        pos.make_move(Move(make_square(0, 3), D5))
        pos.unmake_move()
        assert pos.board == snapshot
        assert pos.board[D5] == WP

    def test_history_is_per_position(self) -> None:
        a = Position()
        b = a.copy()
        a.make_move(Move(E2, E4))
        assert b.ply_count == 0
        assert b.board[E2] == WP
