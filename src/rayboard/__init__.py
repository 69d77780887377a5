"""rayboard — chess position representation and legal move generation."""

from rayboard.core import (
    CastlingRights,
    Color,
    Move,
    MoveInfo,
    Piece,
    PieceType,
    Rules,
    State,
    legal_moves,
    perft,
)
from rayboard.errors import CorruptState, IllegalMove, OutOfBounds, RayboardError

__version__ = "0.1.0"

__all__ = [
    "CastlingRights",
    "Color",
    "CorruptState",
    "IllegalMove",
    "Move",
    "MoveInfo",
    "OutOfBounds",
    "Piece",
    "PieceType",
    "RayboardError",
    "Rules",
    "State",
    "legal_moves",
    "perft",
]
