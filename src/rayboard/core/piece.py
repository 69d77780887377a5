"""Piece enumeration: the empty square plus the twelve colored pieces."""

from __future__ import annotations

from enum import IntEnum

from rayboard.core.enums import Color, PieceType


class Piece(IntEnum):
    """Contents of a square.

    Values 1–6 are the white pieces and 7–12 the black pieces, each in
    :class:`PieceType` order, so color and kind are plain arithmetic.
    """

    EMPTY = 0
    WHITE_PAWN = 1
    WHITE_KNIGHT = 2
    WHITE_BISHOP = 3
    WHITE_ROOK = 4
    WHITE_QUEEN = 5
    WHITE_KING = 6
    BLACK_PAWN = 7
    BLACK_KNIGHT = 8
    BLACK_BISHOP = 9
    BLACK_ROOK = 10
    BLACK_QUEEN = 11
    BLACK_KING = 12

    @classmethod
    def make(cls, color: Color, piece_type: PieceType) -> Piece:
        return cls(int(color) * 6 + int(piece_type))

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN letter, e.g. 'N' → white knight, '.' → empty."""
        try:
            return _FROM_CHAR[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    @property
    def is_empty(self) -> bool:
        return self is Piece.EMPTY

    @property
    def color(self) -> Color | None:
        if self is Piece.EMPTY:
            return None
        return Color.WHITE if self <= 6 else Color.BLACK

    @property
    def piece_type(self) -> PieceType | None:
        if self is Piece.EMPTY:
            return None
        return PieceType((self - 1) % 6 + 1)

    def is_color(self, color: Color) -> bool:
        """Whether this is a non-empty piece of *color*."""
        if color == Color.WHITE:
            return 1 <= self <= 6
        return self >= 7

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _SYMBOLS[self]

    def __str__(self) -> str:
        """FEN letter (uppercase = white, lowercase = black, '.' = empty)."""
        return _CHARS[self]


_CHARS: tuple[str, ...] = (".", "P", "N", "B", "R", "Q", "K", "p", "n", "b", "r", "q", "k")
_SYMBOLS: tuple[str, ...] = (
    "·", "♙", "♘", "♗", "♖", "♕", "♔", "♟", "♞", "♝", "♜", "♛", "♚",
)
_FROM_CHAR: dict[str, Piece] = {ch: Piece(i) for i, ch in enumerate(_CHARS)}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)
