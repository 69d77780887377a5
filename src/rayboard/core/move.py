"""Move record: one ply with everything needed to replay or undo it."""

from __future__ import annotations

from dataclasses import dataclass, field

from rayboard.core.enums import CastlingRights, MoveInfo
from rayboard.core.piece import Piece
from rayboard.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a single ply.

    ``captured`` is the piece removed by the move (for en passant it stands
    on a different square than ``to_sq``).  ``promotion`` is the piece placed
    on ``to_sq`` when ``info`` is :attr:`MoveInfo.PROMOTED`.  ``check`` tells
    whether the move attacks the opposing king.  ``prior_castling`` holds the
    castling rights before the move so that undo can restore them.  Both are
    derived from the position and do not take part in equality.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    captured: Piece = Piece.EMPTY
    info: MoveInfo | None = None
    promotion: Piece = Piece.EMPTY
    check: bool = field(default=False, compare=False)
    prior_castling: CastlingRights = field(default=CastlingRights.NONE, compare=False)

    # ── Classification ───────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return self.captured is not Piece.EMPTY

    @property
    def is_castling(self) -> bool:
        return self.info is MoveInfo.CASTLED

    @property
    def is_en_passant(self) -> bool:
        return self.info is MoveInfo.EN_PASSANT

    @property
    def is_promotion(self) -> bool:
        return self.info is MoveInfo.PROMOTED

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.info is MoveInfo.PROMOTED:
            base += str(self.promotion).lower()
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
