"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chesslet.core.enums import Color, PieceType
from chesslet.core.piece import Piece
from chesslet.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board of optional pieces.

    No piece-count invariant is enforced: a board with no king, or with two
    kings of one color, is perfectly valid.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def at(self, row: int, col: int) -> Piece | None:
        return self._squares[make_square(row, col)]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row-major."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, row-major."""
        return [sq for sq, p in self.occupied() if p.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, p in self.occupied()
            if p.color == color and p.piece_type == piece_type
        ]

    def has_piece(self, color: Color, piece_type: PieceType) -> bool:
        return bool(self.pieces(color, piece_type))

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: black on rows 0–1, white on rows 6–7."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[make_square(0, col)] = Piece(Color.BLACK, pt)
            b[make_square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self.at(row, col)
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
