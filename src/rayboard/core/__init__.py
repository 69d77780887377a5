"""Core domain layer — board geometry, ray tables and move generation.

Quick start::

    from rayboard.core import State

    state = State()
    for move in state.legal_moves():
        print(move)
"""

from rayboard.core.board import Board, PieceBoard
from rayboard.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    GameStatus,
    MoveInfo,
    PieceType,
)
from rayboard.core.move import Move
from rayboard.core.move_generator import MoveGenerator, legal_moves
from rayboard.core.perft import divide, perft
from rayboard.core.piece import Piece
from rayboard.core.rays import RAY_TABLES, RayTables, build_ray_tables, ray, rays
from rayboard.core.rules import Rules
from rayboard.core.state import State
from rayboard.core.types import (
    SQUARES,
    Square,
    file_of,
    make_square,
    on_board,
    parse_square,
    rank_of,
    square,
    square_name,
    to_square,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "GameStatus",
    "MoveInfo",
    "PieceType",
    # Types / geometry
    "SQUARES",
    "Square",
    "file_of",
    "make_square",
    "on_board",
    "parse_square",
    "rank_of",
    "square",
    "square_name",
    "to_square",
    # Tables
    "RAY_TABLES",
    "RayTables",
    "build_ray_tables",
    "ray",
    "rays",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "PieceBoard",
    "Rules",
    "State",
    "legal_moves",
    # Counting
    "divide",
    "perft",
]
