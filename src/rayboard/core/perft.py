"""Perft — leaf-node counts of the legal move tree.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rayboard.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from rayboard.core.state import State


def perft(state: State, depth: int) -> int:
    """Count leaf nodes at *depth* using make/unmake."""
    if depth < 0:
        raise ValueError("Perft depth must be >= 0")
    if depth == 0:
        return 1
    moves = MoveGenerator(state).generate_legal_moves()
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        state.make_move(move)
        nodes += perft(state, depth - 1)
        state.unmake_move()
    return nodes


def divide(state: State, depth: int) -> dict[str, int]:
    """Perft split by root move, keyed by UCI string."""
    if depth < 1:
        raise ValueError("Divide depth must be >= 1")
    counts: dict[str, int] = {}
    for move in MoveGenerator(state).generate_legal_moves():
        state.make_move(move)
        counts[move.uci] = perft(state, depth - 1)
        state.unmake_move()
    return counts
