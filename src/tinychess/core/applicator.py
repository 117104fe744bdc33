"""Move application: derive the next position from a position and a move."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from tinychess.core.enums import CastlingRights, Color, PieceType
from tinychess.core.piece import Piece
from tinychess.core.types import Square, rank_of

if TYPE_CHECKING:
    from tinychess.core.move import Move
    from tinychess.core.position import Position

# Rook relocation for castling, keyed by the king's destination square.
_CASTLING_ROOKS: dict[Square, tuple[Square, Square]] = {
    6: (7, 5),  # white king-side:  h1 → f1
    2: (0, 3),  # white queen-side: a1 → d1
    62: (63, 61),  # black king-side:  h8 → f8
    58: (56, 59),  # black queen-side: a8 → d8
}

# A rook leaving, or being captured on, one of these squares loses that right.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    0: CastlingRights.WHITE_QUEENSIDE,
    7: CastlingRights.WHITE_KINGSIDE,
    56: CastlingRights.BLACK_QUEENSIDE,
    63: CastlingRights.BLACK_KINGSIDE,
}


def apply_move(position: Position, move: Move) -> Position:
    """Return the position reached by playing *move*.

    *move* must be pseudo-legal for *position*; whether it leaves the
    mover's king in check is not examined here. *position* itself is
    never modified.
    """
    board = list(position.board)
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    captured = board[move.to_sq]
    halfmove_clock = position.halfmove_clock + 1
    en_passant: Square | None = None

    if move.is_en_passant:
        # The captured pawn sits one rank behind the destination, from the
        # mover's point of view.
        board[move.to_sq - 8 * piece.color.pawn_direction] = None
        halfmove_clock = 0
    elif captured is not None:
        halfmove_clock = 0

    board[move.to_sq] = piece
    board[move.from_sq] = None

    if move.promotion is not None:
        board[move.to_sq] = Piece(piece.color, move.promotion)
        halfmove_clock = 0

    if move.is_castling and move.to_sq in _CASTLING_ROOKS:
        rook_from, rook_to = _CASTLING_ROOKS[move.to_sq]
        board[rook_to] = board[rook_from]
        board[rook_from] = None

    if piece.piece_type == PieceType.PAWN:
        halfmove_clock = 0
        if abs(rank_of(move.to_sq) - rank_of(move.from_sq)) == 2:
            en_passant = (move.from_sq + move.to_sq) // 2

    castling = _next_castling(position.castling, move, piece)

    fullmove_number = position.fullmove_number
    if position.side_to_move == Color.BLACK:
        fullmove_number += 1

    return replace(
        position,
        board=tuple(board),
        side_to_move=position.side_to_move.opposite,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )


def _next_castling(
    castling: CastlingRights, move: Move, piece: Piece
) -> CastlingRights:
    if piece.piece_type == PieceType.KING:
        castling &= ~CastlingRights.both(piece.color)
    elif piece.piece_type == PieceType.ROOK and move.from_sq in _ROOK_CORNERS:
        castling &= ~_ROOK_CORNERS[move.from_sq]

    if move.to_sq in _ROOK_CORNERS:
        castling &= ~_ROOK_CORNERS[move.to_sq]
    return castling


def make_move(position: Position, move: Move) -> Position | None:
    """Play *move* if it is legal in *position*, otherwise return ``None``."""
    from tinychess.core.move_generator import generate_legal_moves

    if move not in generate_legal_moves(position):
        return None
    return apply_move(position, move)
