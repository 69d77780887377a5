"""Tests for the precomputed ray tables."""

import pytest

from rayboard.core.rays import (
    BISHOP_DIRS,
    KNIGHT_DIRS,
    QUEEN_DIRS,
    RAY_TABLES,
    ROOK_DIRS,
    ray,
    rays,
)
from rayboard.core.types import (
    A1, B2, B3, C2, C3, D4, D5, E4, E5, F6, G7, H1, H8,
    SQUARES,
)


def _reach(table, sq: int) -> set[int]:
    return {to_sq for r in table[sq] for to_sq in r}


class TestRay:
    def test_diagonal_ray_to_corner(self) -> None:
        assert ray(D4, (1, 1)) == (E5, F6, G7, H8)

    def test_ray_off_board_is_empty(self) -> None:
        assert ray(H8, (1, 1)) == ()
        assert ray(A1, (-1, 0)) == ()

    def test_once_truncates(self) -> None:
        assert ray(D4, (1, 1), once=True) == (E5,)
        assert ray(A1, (1, 2), once=True) == (B3,)

    def test_knight_offset_off_board(self) -> None:
        assert ray(H1, (1, 2), once=True) == ()


class TestRayTables:
    def test_no_empty_rays(self) -> None:
        for table in (
            RAY_TABLES.bishop,
            RAY_TABLES.rook,
            RAY_TABLES.queen,
            RAY_TABLES.king,
            RAY_TABLES.knight,
        ):
            for sq in SQUARES:
                assert all(len(r) > 0 for r in table[sq])

    def test_corner_counts(self) -> None:
        assert len(RAY_TABLES.bishop[A1]) == 1
        assert len(RAY_TABLES.rook[A1]) == 2
        assert len(RAY_TABLES.queen[A1]) == 3
        assert len(RAY_TABLES.king[A1]) == 3
        assert len(RAY_TABLES.knight[A1]) == 2

    def test_bishop_from_a1(self) -> None:
        assert RAY_TABLES.bishop[A1] == ((B2, C3, D4, E5, F6, G7, H8),)

    def test_centre_reach(self) -> None:
        assert len(_reach(RAY_TABLES.bishop, D4)) == 13
        assert len(_reach(RAY_TABLES.queen, D4)) == 27
        assert len(_reach(RAY_TABLES.knight, D4)) == 8
        assert len(_reach(RAY_TABLES.king, D4)) == 8

    def test_rook_reach_constant(self) -> None:
        for sq in SQUARES:
            assert len(_reach(RAY_TABLES.rook, sq)) == 14

    def test_queen_is_union(self) -> None:
        for sq in SQUARES:
            assert _reach(RAY_TABLES.queen, sq) == (
                _reach(RAY_TABLES.bishop, sq) | _reach(RAY_TABLES.rook, sq)
            )

    def test_leaper_rays_have_one_square(self) -> None:
        for sq in SQUARES:
            assert all(len(r) == 1 for r in RAY_TABLES.king[sq])
            assert all(len(r) == 1 for r in RAY_TABLES.knight[sq])

    def test_knight_from_a1(self) -> None:
        assert _reach(RAY_TABLES.knight, A1) == {B3, C2}

    @pytest.mark.parametrize("dirs", [BISHOP_DIRS, ROOK_DIRS, QUEEN_DIRS, KNIGHT_DIRS])
    def test_rays_rebuild_deterministically(self, dirs) -> None:
        assert rays(False, dirs) == rays(False, dirs)

    def test_adjacent_king_step(self) -> None:
        assert D5 in _reach(RAY_TABLES.king, E4)
