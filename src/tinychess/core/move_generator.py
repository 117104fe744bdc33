"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tinychess.core.applicator import apply_move
from tinychess.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_in_check,
    is_square_attacked,
)
from tinychess.core.enums import CastlingRights, Color, PieceType
from tinychess.core.move import Move
from tinychess.core.move_list import MoveList
from tinychess.core.piece import Piece
from tinychess.core.types import Square, file_distance, rank_of

if TYPE_CHECKING:
    from tinychess.core.position import Position

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class _CastlingWing:
    kingside: bool
    king_from: Square
    king_to: Square
    rook_corner: Square
    must_be_empty: tuple[Square, ...]
    must_be_safe: tuple[Square, ...]


_CASTLING_WINGS: dict[Color, tuple[_CastlingWing, ...]] = {
    Color.WHITE: (
        _CastlingWing(True, 4, 6, 7, (5, 6), (5, 6)),
        _CastlingWing(False, 4, 2, 0, (1, 2, 3), (2, 3)),
    ),
    Color.BLACK: (
        _CastlingWing(True, 60, 62, 63, (61, 62), (61, 62)),
        _CastlingWing(False, 60, 58, 56, (57, 58, 59), (58, 59)),
    ),
}


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    Legality is decided by applying each pseudo-legal candidate to a copy
    and asking whether the mover's king is attacked afterwards, so no
    pinned-piece bookkeeping is needed.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> MoveList:
        """All strictly legal moves for the side to move."""
        moves = self.generate_pseudo_legal_moves()
        position = self._pos
        mover = position.side_to_move
        moves.retain(lambda move: not is_in_check(apply_move(position, move), mover))
        return moves

    def generate_pseudo_legal_moves(self) -> MoveList:
        """All pseudo-legal moves (may leave own king in check)."""
        moves = MoveList()
        color = self._pos.side_to_move

        for sq, piece in enumerate(self._board):
            if piece is None or piece.color != color:
                continue
            ptype = piece.piece_type
            if ptype == PieceType.PAWN:
                self._gen_pawn(sq, color, moves)
            elif ptype == PieceType.KNIGHT:
                self._gen_leaper(sq, color, KNIGHT_TARGETS[sq], moves)
            elif ptype == PieceType.BISHOP:
                self._gen_sliding(sq, color, BISHOP_RAYS[sq], moves)
            elif ptype == PieceType.ROOK:
                self._gen_sliding(sq, color, ROOK_RAYS[sq], moves)
            elif ptype == PieceType.QUEEN:
                self._gen_sliding(sq, color, QUEEN_RAYS[sq], moves)
            elif ptype == PieceType.KING:
                self._gen_leaper(sq, color, KING_TARGETS[sq], moves)
                self._gen_castling(sq, color, moves)
            else:
                raise ValueError(f"Unknown piece type: {ptype!r}")

        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(self._pos, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(self._pos, sq, by_color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: MoveList) -> None:
        board = self._board
        forward = 8 * color.pawn_direction

        one_step = sq + forward
        if 0 <= one_step < 64 and board[one_step] is None:
            self._push_pawn_move(sq, one_step, color, moves)
            if rank_of(sq) == color.home_rank:
                two_step = one_step + forward
                if board[two_step] is None:
                    moves.push(Move(sq, two_step))

        for side in (-1, 1):
            cap_sq = sq + forward + side
            if not 0 <= cap_sq < 64 or file_distance(sq, cap_sq) != 1:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    self._push_pawn_move(sq, cap_sq, color, moves)
            elif cap_sq == self._pos.en_passant:
                moves.push(Move(sq, cap_sq, is_en_passant=True))

    def _push_pawn_move(
        self, from_sq: Square, to_sq: Square, color: Color, moves: MoveList
    ) -> None:
        if rank_of(to_sq) == color.promotion_rank:
            for pt in PROMOTION_TYPES:
                moves.push(Move(from_sq, to_sq, promotion=pt))
        else:
            moves.push(Move(from_sq, to_sq))

    def _gen_leaper(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: MoveList,
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.push(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: MoveList,
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.push(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.push(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: MoveList) -> None:
        castling = self._pos.castling
        if not castling & CastlingRights.both(color):
            return
        if self.is_in_check(color):
            return

        board = self._board
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)
        for wing in _CASTLING_WINGS[color]:
            if king_sq != wing.king_from:
                continue
            if not castling & CastlingRights.for_side(color, wing.kingside):
                continue
            if board[wing.rook_corner] != rook:
                continue
            if any(board[s] is not None for s in wing.must_be_empty):
                continue
            if any(
                is_square_attacked(self._pos, s, opponent) for s in wing.must_be_safe
            ):
                continue
            moves.push(Move(king_sq, wing.king_to, is_castling=True))


def generate_pseudo_legal(position: Position) -> MoveList:
    return MoveGenerator(position).generate_pseudo_legal_moves()


def generate_legal_moves(position: Position) -> MoveList:
    return MoveGenerator(position).generate_legal_moves()
