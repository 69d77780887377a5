"""Square type alias and board geometry.

Board layout (rank-major, a1 first):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from typing import Final, TypeAlias

from rayboard.errors import OutOfBounds

Square: TypeAlias = int  # 0–63
Direction: TypeAlias = tuple[int, int]  # (file delta, rank delta)

BOARD_SIZE: Final = 8
SQUARE_COUNT: Final = BOARD_SIZE * BOARD_SIZE

SQUARES: Final = tuple(range(SQUARE_COUNT))

_FILE_NAMES: Final = "abcdefgh"
_RANK_NAMES: Final = "12345678"


def on_board(file: int, rank: int) -> bool:
    """Whether (*file*, *rank*) names a square of the 8x8 board."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def make_square(file: int, rank: int) -> Square:
    """Square from file (0–7) and rank (0–7) without bounds checking."""
    return rank * BOARD_SIZE + file


def square(file: int, rank: int) -> Square:
    """Square from file and rank; raises :class:`OutOfBounds` off the board."""
    if not on_board(file, rank):
        raise OutOfBounds(f"No square at file={file}, rank={rank}")
    return make_square(file, rank)


def to_square(index: int) -> Square:
    """Validate an integer square index."""
    if not 0 <= index < SQUARE_COUNT:
        raise OutOfBounds(f"Invalid square index: {index}")
    return index


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return _FILE_NAMES[file_of(sq)] + _RANK_NAMES[rank_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in _FILE_NAMES or name[1] not in _RANK_NAMES:
        raise OutOfBounds(f"Invalid square name: {name!r}")
    return make_square(_FILE_NAMES.index(name[0]), _RANK_NAMES.index(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
