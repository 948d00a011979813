"""Tests for Board, Piece and square helpers."""

import pytest

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType
from chesslet.core.piece import Piece
from chesslet.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_white_pawns_on_row_six(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.WHITE, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(row_of(sq) == 6 for sq in pawns)

    def test_black_pawns_on_row_one(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(row_of(sq) == 1 for sq in pawns)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None


class TestBoardMutation:
    def test_set_and_clear_square(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.QUEEN)
        assert not board.is_empty(E4)
        board[E4] = None
        assert board.is_empty(E4)

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[E2] = None
        assert board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert board != clone

    def test_equality(self) -> None:
        assert Board.initial() == Board.initial()
        assert Board() != Board.initial()

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board == Board()

    def test_occupied_is_row_major(self) -> None:
        board = Board.initial()
        squares = [sq for sq, _ in board.occupied()]
        assert squares == sorted(squares)
        assert len(squares) == 32

    def test_multiple_kings_allowed(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.KING)
        board[H1] = Piece(Color.WHITE, PieceType.KING)
        assert len(board.pieces(Color.WHITE, PieceType.KING)) == 2
        assert not board.has_piece(Color.BLACK, PieceType.KING)

    def test_repr_draws_ranks(self) -> None:
        text = repr(Board.initial())
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[-1] == "  a b c d e f g h"


class TestSquareHelpers:
    def test_named_squares(self) -> None:
        assert E1 == make_square(7, 4)
        assert A8 == make_square(0, 0)
        assert square_name(E1) == "e1"
        assert square_name(H8) == "h8"

    def test_parse_round_trip(self) -> None:
        assert parse_square("e4") == E4
        assert row_of(E4) == 4
        assert col_of(E4) == 4

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44"])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_str(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.WHITE, PieceType.KNIGHT).symbol == "♘"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"
        assert Piece(Color.BLACK, PieceType.QUEEN).symbol == "♛"

    def test_promoted_keeps_color(self) -> None:
        queen = Piece(Color.BLACK, PieceType.PAWN).promoted()
        assert queen == Piece(Color.BLACK, PieceType.QUEEN)

    def test_is_immutable(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]
