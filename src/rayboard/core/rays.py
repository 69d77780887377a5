"""Precomputed per-square destination tables for every movement pattern.

A table maps each square to the rays leaving it, one per direction that
reaches at least one on-board square.  Sliders walk a ray until blocked;
leapers (king, knight) use rays truncated to a single step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rayboard.core.board import Board
from rayboard.core.types import Direction, Square, file_of, make_square, on_board, rank_of

_LOGGER = logging.getLogger(__name__)

Ray = tuple[Square, ...]
RayTable = Board[tuple[Ray, ...]]

BISHOP_DIRS: tuple[Direction, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS
KNIGHT_DIRS: tuple[Direction, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)


def ray(sq: Square, direction: Direction, once: bool = False) -> Ray:
    """Squares reached from *sq* by repeatedly stepping in *direction*.

    With *once* the ray stops after its first on-board square.
    """
    df, dr = direction
    f = file_of(sq) + df
    r = rank_of(sq) + dr
    squares: list[Square] = []
    while on_board(f, r):
        squares.append(make_square(f, r))
        if once:
            break
        f += df
        r += dr
    return tuple(squares)


def rays(once: bool, directions: tuple[Direction, ...]) -> RayTable:
    """Non-empty rays from every square, in *directions* order."""
    return Board.from_squares(
        lambda sq: tuple(r for r in (ray(sq, d, once) for d in directions) if r)
    )


@dataclass(frozen=True, slots=True)
class RayTables:
    """Destination tables for all non-pawn pieces.

    Built once and never mutated, so a single instance is shared by every
    :class:`~rayboard.core.move_generator.MoveGenerator`.
    """

    bishop: RayTable
    rook: RayTable
    queen: RayTable
    king: RayTable
    knight: RayTable


def build_ray_tables() -> RayTables:
    tables = RayTables(
        bishop=rays(False, BISHOP_DIRS),
        rook=rays(False, ROOK_DIRS),
        queen=rays(False, QUEEN_DIRS),
        king=rays(True, QUEEN_DIRS),
        knight=rays(True, KNIGHT_DIRS),
    )
    _LOGGER.debug("Built ray tables for %d squares", len(tables.queen))
    return tables


RAY_TABLES = build_ray_tables()
