"""Exception hierarchy for the rules kernel."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rayboard.core.move import Move


class RayboardError(Exception):
    """Base class for every error raised by this package."""


class OutOfBounds(RayboardError, ValueError):
    """A file, rank or square index lies outside the 8x8 board."""


class IllegalMove(RayboardError, ValueError):
    """A move was applied that is not legal in the current state."""

    def __init__(self, move: Move | None, message: str | None = None) -> None:
        self.move = move
        super().__init__(message or f"Illegal move: {move}")


class CorruptState(RayboardError, RuntimeError):
    """Internal invariants of a state no longer hold (e.g. undo with no history)."""
