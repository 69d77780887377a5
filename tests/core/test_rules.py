"""Tests for Rules: check, checkmate, stalemate, dead positions."""

from rayboard.core.enums import Color, GameResult, GameStatus
from rayboard.core.rules import Rules
from rayboard.core.state import State
from rayboard.core.types import D8, E5, E7, F2, F3, G2, G4, H4


def _fools_mate() -> State:
    state = State()
    for from_sq, to_sq in ((F2, F3), (E7, E5), (G2, G4), (D8, H4)):
        state.apply(state.find_move(from_sq, to_sq))
    return state


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(State())

    def test_fools_mate_in_check(self) -> None:
        assert Rules.is_in_check(_fools_mate())


class TestCheckmate:
    def test_fools_mate(self) -> None:
        state = _fools_mate()
        assert Rules.is_checkmate(state)
        assert Rules.status(state) == GameStatus.CHECKMATE
        assert Rules.game_result(state) == GameResult.BLACK_WINS

    def test_back_rank_mate(self, make_state) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        state = make_state("R2k4/8/3K4/8/8/8/8/8", side_to_move=Color.BLACK)
        assert Rules.is_checkmate(state)
        assert Rules.game_result(state) == GameResult.WHITE_WINS

    def test_not_checkmate_when_can_escape(self, make_state) -> None:
        # King can move out of check
        state = make_state("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.is_in_check(state)
        assert not Rules.is_checkmate(state)

    def test_undo_leaves_mate(self) -> None:
        state = _fools_mate()
        state.undo()
        assert Rules.status(state) == GameStatus.ONGOING


class TestStalemate:
    def test_king_trapped(self, make_state) -> None:
        # Black king on h8, white K on f6, white Q on g6
        state = make_state("7k/8/5KQ1/8/8/8/8/8", side_to_move=Color.BLACK)
        assert Rules.is_stalemate(state)
        assert Rules.status(state) == GameStatus.STALEMATE
        assert Rules.game_result(state) == GameResult.DRAW

    def test_not_stalemate_when_has_moves(self, make_state) -> None:
        state = make_state("7k/8/5K2/8/8/8/8/8", side_to_move=Color.BLACK)
        assert not Rules.is_stalemate(state)

    def test_checkmate_is_not_stalemate(self) -> None:
        assert not Rules.is_stalemate(_fools_mate())


class TestInsufficientMaterial:
    def test_k_vs_k(self, make_state) -> None:
        state = make_state("8/8/4k3/8/8/4K3/8/8")
        assert Rules.is_insufficient_material(state)
        assert Rules.status(state) == GameStatus.INSUFFICIENT_MATERIAL
        assert Rules.game_result(state) == GameResult.DRAW

    def test_k_bishop_vs_k(self, make_state) -> None:
        assert Rules.is_insufficient_material(make_state("8/8/4k3/8/8/4K3/3B4/8"))

    def test_k_knight_vs_k(self, make_state) -> None:
        assert Rules.is_insufficient_material(make_state("8/8/4k3/8/8/4K3/3N4/8"))

    def test_k_rook_vs_k_sufficient(self, make_state) -> None:
        assert not Rules.is_insufficient_material(make_state("8/8/4k3/8/8/4K3/3R4/8"))

    def test_same_color_bishops(self, make_state) -> None:
        # Bishops on c1 and f8 both stand on dark squares
        assert Rules.is_insufficient_material(make_state("5b2/8/4k3/8/8/4K3/8/2B5"))

    def test_opposite_color_bishops(self, make_state) -> None:
        assert not Rules.is_insufficient_material(make_state("4kb2/8/8/8/8/4K3/8/3B4"))

    def test_starting_position(self) -> None:
        assert not Rules.is_insufficient_material(State())
        assert Rules.game_result(State()) == GameResult.IN_PROGRESS
