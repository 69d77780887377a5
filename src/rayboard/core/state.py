"""State — piece placement, castling availability and move history."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

from rayboard.config import get_settings
from rayboard.core.board import PieceBoard
from rayboard.core.enums import CastlingRights, Color, MoveInfo, PieceType
from rayboard.core.move import Move
from rayboard.core.piece import Piece
from rayboard.core.types import Square, file_of, make_square, rank_of, square_name
from rayboard.errors import CorruptState, IllegalMove

_LOGGER = logging.getLogger(__name__)

# Rook home corner -> castling right lost when that corner is vacated or captured.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
    make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
    make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
}


def castling_rook_squares(king_to: Square) -> tuple[Square, Square]:
    """(rook_from, rook_to) for a castling king landing on *king_to*."""
    r = rank_of(king_to)
    if file_of(king_to) == 6:
        return make_square(7, r), make_square(5, r)
    return make_square(0, r), make_square(3, r)


class State:
    """Game state: board + castling flags + ordered move history.

    Side to move and the en-passant target are not stored; both are derived
    from the history.  Mutated only through :meth:`apply` / :meth:`undo`
    (or the unchecked :meth:`make_move` / :meth:`unmake_move` used by the
    move generator).
    """

    __slots__ = ("board", "castling", "_history", "_first_to_move")

    def __init__(
        self,
        board: PieceBoard | None = None,
        castling: CastlingRights = CastlingRights.ALL,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else PieceBoard.initial()
        self.castling = castling
        self._history: list[Move] = []
        self._first_to_move = side_to_move

    @classmethod
    def from_pieces(
        cls,
        placement: Mapping[Square, Piece],
        castling: CastlingRights = CastlingRights.NONE,
        side_to_move: Color = Color.WHITE,
    ) -> State:
        """Set up an arbitrary position from a square → piece mapping."""
        board = PieceBoard()
        for sq, piece in placement.items():
            board[sq] = piece
        return cls(board, castling, side_to_move)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        if len(self._history) % 2 == 0:
            return self._first_to_move
        return self._first_to_move.opposite

    def piece_at(self, sq: Square) -> Piece:
        return self.board[sq]

    @property
    def white_can_castle_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_KINGSIDE)

    @property
    def white_can_castle_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_QUEENSIDE)

    @property
    def black_can_castle_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_KINGSIDE)

    @property
    def black_can_castle_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_QUEENSIDE)

    @property
    def ply_count(self) -> int:
        return len(self._history)

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def en_passant_target(self) -> Square | None:
        """Square behind a pawn that just advanced two ranks, if any."""
        if not self._history:
            return None
        last = self._history[-1]
        if last.piece.piece_type != PieceType.PAWN:
            return None
        from_rank = rank_of(last.from_sq)
        to_rank = rank_of(last.to_sq)
        if abs(to_rank - from_rank) != 2:
            return None
        return make_square(file_of(last.to_sq), (from_rank + to_rank) // 2)

    def legal_moves(self) -> list[Move]:
        from rayboard.core.move_generator import MoveGenerator

        return MoveGenerator(self).generate_legal_moves()

    def is_in_check(self) -> bool:
        from rayboard.core.move_generator import MoveGenerator

        return MoveGenerator(self).is_in_check(self.side_to_move)

    def find_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> Move:
        """The legal move between two squares (and promotion choice)."""
        for move in self.legal_moves():
            if move.from_sq != from_sq or move.to_sq != to_sq:
                continue
            if move.is_promotion and move.promotion.piece_type != promotion:
                continue
            return move
        raise IllegalMove(
            Move(self.board[from_sq], from_sq, to_sq),
            f"No legal move {square_name(from_sq)}{square_name(to_sq)}"
            f" for {self.side_to_move!s}",
        )

    # ── Checked transitions ──────────────────────────────────────────────

    def apply(self, move: Move, validate: bool | None = None) -> Move:
        """Play *move* and return the record appended to the history.

        Unless validation is switched off (per call or through
        ``RAYBOARD_VALIDATE_MOVES``) the move must be one of
        :meth:`legal_moves`; otherwise :class:`IllegalMove` is raised and the
        state is left untouched.
        """
        if validate is None:
            validate = get_settings().validate_moves
        if validate:
            legal = self.legal_moves()
            try:
                move = legal[legal.index(move)]
            except ValueError:
                _LOGGER.warning("Rejected illegal move %s at ply %d", move, self.ply_count)
                raise IllegalMove(move) from None
        self.make_move(move)
        _LOGGER.debug("Applied %s (ply %d)", move, self.ply_count)
        return self._history[-1]

    def undo(self) -> Move:
        """Take back the last move; raises :class:`CorruptState` if there is none."""
        move = self.unmake_move()
        _LOGGER.debug("Undid %s (ply %d)", move, self.ply_count)
        return move

    # ── Raw make / unmake ────────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move* without legality checks."""
        board = self.board
        if move.prior_castling != self.castling:
            move = replace(move, prior_castling=self.castling)

        board[move.from_sq] = Piece.EMPTY

        # En passant: the captured pawn sits beside the origin, not on to_sq
        if move.info is MoveInfo.EN_PASSANT:
            board[make_square(file_of(move.to_sq), rank_of(move.from_sq))] = Piece.EMPTY

        if move.info is MoveInfo.PROMOTED:
            board[move.to_sq] = move.promotion
        else:
            board[move.to_sq] = move.piece

        if move.info is MoveInfo.CASTLED:
            rook_from, rook_to = castling_rook_squares(move.to_sq)
            board[rook_to] = board[rook_from]
            board[rook_from] = Piece.EMPTY

        self._update_castling(move)
        self._history.append(move)

    def unmake_move(self) -> Move:
        """Reverse the last :meth:`make_move` and return its record."""
        if not self._history:
            raise CorruptState("Cannot undo: move history is empty")
        move = self._history.pop()
        board = self.board

        board[move.from_sq] = move.piece
        if move.info is MoveInfo.EN_PASSANT:
            board[move.to_sq] = Piece.EMPTY
            board[make_square(file_of(move.to_sq), rank_of(move.from_sq))] = move.captured
        else:
            board[move.to_sq] = move.captured

        if move.info is MoveInfo.CASTLED:
            rook_from, rook_to = castling_rook_squares(move.to_sq)
            board[rook_from] = board[rook_to]
            board[rook_to] = Piece.EMPTY

        self.castling = move.prior_castling
        return move

    def _update_castling(self, move: Move) -> None:
        castling = self.castling
        if not castling:
            return
        if move.piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(move.piece.color)
        for sq in (move.from_sq, move.to_sq):
            right = _ROOK_CORNERS.get(sq)
            if right is not None:
                castling &= ~right
        self.castling = castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> State:
        state = State(self.board.copy(), self.castling, self._first_to_move)
        state._history = self._history.copy()
        return state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return (
            self.board == other.board
            and self.castling == other.castling
            and self._first_to_move == other._first_to_move
            and self._history == other._history
        )

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move!s} to move, castling={self.castling!r}"
