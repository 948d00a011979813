"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.enums import Color, PieceType

# Placement character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# White symbols are U+2654.., black U+265A.., both ordered K Q R B N P.
_UNICODE_ORDER: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    A move never mutates a piece; it replaces the reference held by a square.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Placement character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from placement character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        base = 0x2654 if self.color == Color.WHITE else 0x265A
        return chr(base + _UNICODE_ORDER.index(self.piece_type))

    def promoted(self) -> Piece:
        """The queen that replaces this piece on promotion."""
        return Piece(self.color, PieceType.QUEEN)
