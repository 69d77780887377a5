"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from rayboard.config import get_settings
from rayboard.core.enums import CastlingRights, Color, MoveInfo, PieceType
from rayboard.core.move import Move
from rayboard.core.piece import PROMOTION_TYPES, Piece
from rayboard.core.rays import RAY_TABLES, RayTable, RayTables
from rayboard.core.types import Square, file_of, make_square, on_board, rank_of

if TYPE_CHECKING:
    from rayboard.core.state import State


def _move_order(move: Move) -> tuple[int, int, int]:
    return (move.from_sq, move.to_sq, int(move.promotion))


class MoveGenerator:
    """Generates legal moves for a given :class:`State`.

    The generator mutates the state via ``make_move`` / ``unmake_move``
    internally but always restores it before returning.
    """

    __slots__ = ("_state", "_board", "_tables")

    def __init__(self, state: State, tables: RayTables = RAY_TABLES) -> None:
        self._state = state
        self._board = state.board
        self._tables = tables

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move, check flags set."""
        state = self._state
        mover = state.side_to_move
        opponent = mover.opposite
        legal: list[Move] = []

        for move in self.generate_pseudo_legal_moves():
            state.make_move(move)
            if not self.is_in_check(mover):
                if self.is_in_check(opponent):
                    move = replace(move, check=True)
                legal.append(move)
            state.unmake_move()

        if get_settings().sort_moves:
            legal.sort(key=_move_order)
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        color = self._state.side_to_move
        tables = self._tables

        for sq, piece in self._board.items():
            if not piece.is_color(color):
                continue
            piece_type = piece.piece_type
            if piece_type == PieceType.PAWN:
                self._gen_pawn(sq, piece, color, moves)
            elif piece_type == PieceType.KNIGHT:
                self._gen_leaper(sq, piece, color, tables.knight, moves)
            elif piece_type == PieceType.BISHOP:
                self._gen_sliding(sq, piece, color, tables.bishop, moves)
            elif piece_type == PieceType.ROOK:
                self._gen_sliding(sq, piece, color, tables.rook, moves)
            elif piece_type == PieceType.QUEEN:
                self._gen_sliding(sq, piece, color, tables.queen, moves)
            else:
                self._gen_leaper(sq, piece, color, tables.king, moves)
                self._gen_castling(sq, piece, color, moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A side without a king is never in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Pawns attack diagonally whether or not the square is occupied;
        castling never attacks anything.
        """
        board = self._board
        tables = self._tables

        pawn = Piece.make(by_color, PieceType.PAWN)
        pawn_rank = rank_of(sq) - by_color.pawn_direction
        for df in (-1, 1):
            pawn_file = file_of(sq) + df
            if on_board(pawn_file, pawn_rank) and board[make_square(pawn_file, pawn_rank)] is pawn:
                return True

        knight = Piece.make(by_color, PieceType.KNIGHT)
        for (to_sq,) in tables.knight[sq]:
            if board[to_sq] is knight:
                return True

        king = Piece.make(by_color, PieceType.KING)
        for (to_sq,) in tables.king[sq]:
            if board[to_sq] is king:
                return True

        queen = Piece.make(by_color, PieceType.QUEEN)
        if self._slider_attacks(sq, tables.bishop, Piece.make(by_color, PieceType.BISHOP), queen):
            return True
        return self._slider_attacks(sq, tables.rook, Piece.make(by_color, PieceType.ROOK), queen)

    def _slider_attacks(self, sq: Square, table: RayTable, slider: Piece, queen: Piece) -> bool:
        board = self._board
        for ray in table[sq]:
            for to_sq in ray:
                piece = board[to_sq]
                if piece is Piece.EMPTY:
                    continue
                if piece is slider or piece is queen:
                    return True
                break
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, color: Color, moves: list[Move]) -> None:
        board = self._board
        castling = self._state.castling
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        step = color.pawn_direction
        start_rank = 1 if color == Color.WHITE else 6
        ahead = rank_idx + step
        if not 0 <= ahead < 8:
            return

        one_step = make_square(file_idx, ahead)
        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, piece, color, Piece.EMPTY, moves)
            if rank_idx == start_rank:
                two_step = make_square(file_idx, ahead + step)
                if board.is_empty(two_step):
                    moves.append(Move(piece, sq, two_step, prior_castling=castling))

        for df in (-1, 1):
            cap_file = file_idx + df
            if not 0 <= cap_file < 8:
                continue
            cap_sq = make_square(cap_file, ahead)
            target = board[cap_sq]
            if target.is_color(color.opposite):
                self._add_pawn_move(sq, cap_sq, piece, color, target, moves)

        ep_sq = self._state.en_passant_target
        if ep_sq is not None and rank_of(ep_sq) == ahead and abs(file_of(ep_sq) - file_idx) == 1:
            victim = board[make_square(file_of(ep_sq), rank_idx)]
            if victim is Piece.make(color.opposite, PieceType.PAWN):
                moves.append(
                    Move(
                        piece,
                        sq,
                        ep_sq,
                        victim,
                        MoveInfo.EN_PASSANT,
                        prior_castling=castling,
                    )
                )

    def _add_pawn_move(
        self,
        sq: Square,
        to_sq: Square,
        piece: Piece,
        color: Color,
        captured: Piece,
        moves: list[Move],
    ) -> None:
        castling = self._state.castling
        if rank_of(to_sq) == (7 if color == Color.WHITE else 0):
            for pt in PROMOTION_TYPES:
                moves.append(
                    Move(
                        piece,
                        sq,
                        to_sq,
                        captured,
                        MoveInfo.PROMOTED,
                        Piece.make(color, pt),
                        prior_castling=castling,
                    )
                )
        else:
            moves.append(Move(piece, sq, to_sq, captured, prior_castling=castling))

    def _gen_leaper(
        self,
        sq: Square,
        piece: Piece,
        color: Color,
        table: RayTable,
        moves: list[Move],
    ) -> None:
        board = self._board
        castling = self._state.castling
        for (to_sq,) in table[sq]:
            target = board[to_sq]
            if not target.is_color(color):
                moves.append(Move(piece, sq, to_sq, target, prior_castling=castling))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        color: Color,
        table: RayTable,
        moves: list[Move],
    ) -> None:
        board = self._board
        castling = self._state.castling
        for ray in table[sq]:
            for to_sq in ray:
                target = board[to_sq]
                if target is Piece.EMPTY:
                    moves.append(Move(piece, sq, to_sq, prior_castling=castling))
                    continue
                if not target.is_color(color):
                    moves.append(Move(piece, sq, to_sq, target, prior_castling=castling))
                break

    def _gen_castling(self, king_sq: Square, piece: Piece, color: Color, moves: list[Move]) -> None:
        castling = self._state.castling
        home = color.home_rank
        if king_sq != make_square(4, home) or not castling & CastlingRights.both(color):
            return

        board = self._board
        opponent = color.opposite
        rook = Piece.make(color, PieceType.ROOK)

        # (right, rook file, squares that must be empty, squares the king crosses)
        sides = (
            (CastlingRights.kingside(color), 7, (5, 6), (4, 5, 6)),
            (CastlingRights.queenside(color), 0, (1, 2, 3), (4, 3, 2)),
        )
        for right, rook_file, between, king_path in sides:
            if not castling & right:
                continue
            if board[make_square(rook_file, home)] is not rook:
                continue
            if not all(board.is_empty(make_square(f, home)) for f in between):
                continue
            if any(self.is_square_attacked(make_square(f, home), opponent) for f in king_path):
                continue
            moves.append(
                Move(
                    piece,
                    king_sq,
                    make_square(king_path[-1], home),
                    info=MoveInfo.CASTLED,
                    prior_castling=castling,
                )
            )


def legal_moves(state: State) -> list[Move]:
    """Shorthand for ``MoveGenerator(state).generate_legal_moves()``."""
    return MoveGenerator(state).generate_legal_moves()
