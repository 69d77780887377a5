"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from rayboard.config import get_settings
from rayboard.core.enums import CastlingRights, Color
from rayboard.core.piece import Piece
from rayboard.core.state import State
from rayboard.core.types import make_square

StateFactory = Callable[..., State]


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Every test sees default settings, read fresh from a clean environment."""
    for name in ("RAYBOARD_VALIDATE_MOVES", "RAYBOARD_SORT_MOVES"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _placement(diagram: str) -> dict[int, Piece]:
    """Parse an 8-row diagram (rank 8 first, '/' separated, digits = empties)."""
    rows = diagram.split("/")
    assert len(rows) == 8, diagram
    placement: dict[int, Piece] = {}
    for row_idx, row in enumerate(rows):
        rank = 7 - row_idx
        file = 0
        for ch in row:
            if ch.isdigit():
                file += int(ch)
                continue
            placement[make_square(file, rank)] = Piece.from_char(ch)
            file += 1
        assert file == 8, row
    return placement


@pytest.fixture
def make_state() -> StateFactory:
    """Build a :class:`State` from a piece diagram, e.g. ``"4k3/8/.../4K3"``."""

    def factory(
        diagram: str,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
    ) -> State:
        return State.from_pieces(_placement(diagram), castling, side_to_move)

    return factory
