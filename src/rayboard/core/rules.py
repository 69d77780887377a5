"""High-level chess rules: check, checkmate, stalemate, dead positions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rayboard.core.enums import Color, GameResult, GameStatus, PieceType
from rayboard.core.move_generator import MoveGenerator
from rayboard.core.types import file_of, rank_of

if TYPE_CHECKING:
    from rayboard.core.state import State


class Rules:
    """Static rule-checker that operates on a :class:`State`.

    Repetition and move-count draws are not tracked; a game ends only by
    checkmate, stalemate or insufficient material.
    """

    @staticmethod
    def is_in_check(state: State) -> bool:
        gen = MoveGenerator(state)
        return gen.is_in_check(state.side_to_move)

    @staticmethod
    def is_checkmate(state: State) -> bool:
        if not Rules.is_in_check(state):
            return False
        gen = MoveGenerator(state)
        return len(gen.generate_legal_moves()) == 0

    @staticmethod
    def is_stalemate(state: State) -> bool:
        if Rules.is_in_check(state):
            return False
        gen = MoveGenerator(state)
        return len(gen.generate_legal_moves()) == 0

    @staticmethod
    def is_insufficient_material(state: State) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        board = state.board
        occupied = [(sq, p) for sq, p in board.items() if not p.is_empty]
        total = len(occupied)

        # K vs K
        if total == 2:
            return True

        minors = (PieceType.KNIGHT, PieceType.BISHOP)

        # K+minor vs K
        if total == 3:
            return any(p.piece_type in minors for _, p in occupied)

        # K+B vs K+B with same-colour bishops
        if total == 4:
            white_bishops = board.pieces(Color.WHITE, PieceType.BISHOP)
            black_bishops = board.pieces(Color.BLACK, PieceType.BISHOP)
            if len(white_bishops) == 1 and len(black_bishops) == 1:
                w_sq, b_sq = white_bishops[0], black_bishops[0]
                w_color = (file_of(w_sq) + rank_of(w_sq)) % 2
                b_color = (file_of(b_sq) + rank_of(b_sq)) % 2
                return w_color == b_color

        return False

    @staticmethod
    def status(state: State) -> GameStatus:
        """Classify the position for the side to move."""
        gen = MoveGenerator(state)
        if not gen.generate_legal_moves():
            if gen.is_in_check(state.side_to_move):
                return GameStatus.CHECKMATE
            return GameStatus.STALEMATE
        if Rules.is_insufficient_material(state):
            return GameStatus.INSUFFICIENT_MATERIAL
        return GameStatus.ONGOING

    @staticmethod
    def game_result(state: State) -> GameResult:
        """Determine the current game result."""
        status = Rules.status(state)
        if status == GameStatus.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if state.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if status == GameStatus.ONGOING:
            return GameResult.IN_PROGRESS
        return GameResult.DRAW
