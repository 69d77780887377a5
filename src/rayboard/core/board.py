"""Board - a value for each of the 64 squares."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from rayboard.core.enums import Color, PieceType
from rayboard.core.piece import Piece
from rayboard.core.types import SQUARE_COUNT, SQUARES, Square, make_square

T = TypeVar("T")
U = TypeVar("U")

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


class Board(Generic[T]):
    """Fixed-size mapping from :data:`Square` to ``T``, total over all squares."""

    __slots__ = ("_squares",)

    def __init__(self, squares: list[T]) -> None:
        if len(squares) != SQUARE_COUNT:
            raise ValueError(f"Board needs {SQUARE_COUNT} squares, got {len(squares)}")
        self._squares: list[T] = squares

    # -- Factories ----------------------------------------------------------

    @classmethod
    def filled(cls, value: T) -> Board[T]:
        """Board with every square holding *value*."""
        return cls([value] * SQUARE_COUNT)

    @classmethod
    def from_squares(cls, func: Callable[[Square], T]) -> Board[T]:
        """Board whose entry for each square ``s`` is ``func(s)``."""
        return cls([func(sq) for sq in SQUARES])

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> T:
        return self._squares[sq]

    def __setitem__(self, sq: Square, value: T) -> None:
        self._squares[sq] = value

    def get(self, sq: Square) -> T:
        return self._squares[sq]

    def set(self, sq: Square, value: T) -> None:
        self[sq] = value

    def items(self) -> Iterator[tuple[Square, T]]:
        return zip(SQUARES, self._squares)

    def map(self, func: Callable[[T], U]) -> Board[U]:
        """New board holding ``func(value)`` for every square."""
        return Board([func(value) for value in self._squares])

    def copy(self) -> Board[T]:
        return type(self)(self._squares.copy())

    # -- Dunder helpers -----------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        return iter(self._squares)

    def __len__(self) -> int:
        return SQUARE_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares


class PieceBoard(Board[Piece]):
    """Mutable mailbox of pieces, one per square."""

    __slots__ = ()

    def __init__(self, squares: list[Piece] | None = None) -> None:
        super().__init__(squares if squares is not None else [Piece.EMPTY] * SQUARE_COUNT)

    @classmethod
    def initial(cls) -> PieceBoard:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece.make(Color.WHITE, pt)
            b[make_square(f, 1)] = Piece.WHITE_PAWN
            b[make_square(f, 6)] = Piece.BLACK_PAWN
            b[make_square(f, 7)] = Piece.make(Color.BLACK, pt)
        return b

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is Piece.EMPTY

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        wanted = Piece.make(color, piece_type)
        return [sq for sq, p in enumerate(self._squares) if p is wanted]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, p in enumerate(self._squares) if p.is_color(color)]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None if it has no king."""
        king = Piece.make(color, PieceType.KING)
        try:
            return self._squares.index(king)
        except ValueError:
            return None

    def clear(self) -> None:
        self._squares = [Piece.EMPTY] * SQUARE_COUNT

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [str(self[make_square(file, rank)]) for file in range(8)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
