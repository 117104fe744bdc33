"""Static evaluation: material plus piece-square tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from tinychess.core.attacks import is_in_check
from tinychess.core.enums import Color, PieceType
from tinychess.core.types import Square, mirror_square

if TYPE_CHECKING:
    from tinychess.core.position import Position

MATE_SCORE: Final = 30_000
# Scores at or beyond this magnitude denote a forced mate.
MATE_THRESHOLD: Final = MATE_SCORE - 64
CHECK_BONUS: Final = 30

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 0,
}

# Piece-square tables from White's side, a1 first: each row is one rank,
# rank 1 at the top of the literal.
# fmt: off
PAWN_PST: tuple[int, ...] = (
     0,  0,  0,  0,  0,  0,  0,  0,
     5,  5,  5, -5, -5,  5,  5,  5,
     2,  2,  2,  2,  2,  2,  2,  2,
     1,  1,  2,  3,  3,  2,  1,  1,
     1,  1,  1,  2,  2,  1,  1,  1,
     2,  2,  2,  3,  3,  2,  2,  2,
     6,  6,  6,  6,  6,  6,  6,  6,
     0,  0,  0,  0,  0,  0,  0,  0,
)

KNIGHT_PST: tuple[int, ...] = (
    -5, -4, -3, -3, -3, -3, -4, -5,
    -4, -2,  0,  0,  0,  0, -2, -4,
    -3,  0,  1,  1,  1,  1,  0, -3,
    -3,  0,  2,  3,  3,  2,  0, -3,
    -3,  0,  2,  3,  3,  2,  0, -3,
    -3,  0,  1,  2,  2,  1,  0, -3,
    -4, -2,  0,  0,  0,  0, -2, -4,
    -5, -4, -3, -3, -3, -3, -4, -5,
)

BISHOP_PST: tuple[int, ...] = (
    -2, -1, -1, -1, -1, -1, -1, -2,
    -1,  1,  0,  0,  0,  0,  1, -1,
    -1,  1,  1,  1,  1,  1,  1, -1,
    -1,  0,  1,  1,  1,  1,  0, -1,
    -1,  0,  1,  1,  1,  1,  0, -1,
    -1,  0,  1,  1,  1,  1,  0, -1,
    -1,  0,  0,  0,  0,  0,  0, -1,
    -2, -1, -1, -1, -1, -1, -1, -2,
)

ROOK_PST: tuple[int, ...] = (
     0,  0,  1,  2,  2,  1,  0,  0,
    -1,  0,  0,  0,  0,  0,  0, -1,
    -1,  0,  0,  0,  0,  0,  0, -1,
    -1,  0,  0,  0,  0,  0,  0, -1,
    -1,  0,  0,  0,  0,  0,  0, -1,
    -1,  0,  0,  0,  0,  0,  0, -1,
     2,  2,  2,  2,  2,  2,  2,  2,
     0,  0,  0,  0,  0,  0,  0,  0,
)

QUEEN_PST: tuple[int, ...] = (
    -4, -2, -2, -1, -1, -2, -2, -4,
    -2,  0,  0,  0,  0,  0,  0, -2,
    -2,  0,  1,  1,  1,  1,  0, -2,
    -1,  0,  1,  1,  1,  1,  0, -1,
    -1,  0,  1,  1,  1,  1,  0, -1,
    -2,  0,  1,  1,  1,  1,  0, -2,
    -2,  0,  0,  0,  0,  0,  0, -2,
    -4, -2, -2, -1, -1, -2, -2, -4,
)

KING_PST: tuple[int, ...] = (
     2,  3,  1,  0,  0,  1,  3,  2,
     2,  2,  0,  0,  0,  0,  2,  2,
    -1, -2, -2, -2, -2, -2, -2, -1,
    -2, -3, -3, -4, -4, -3, -3, -2,
    -3, -4, -4, -5, -5, -4, -4, -3,
    -3, -4, -4, -5, -5, -4, -4, -3,
    -3, -4, -4, -5, -5, -4, -4, -3,
    -3, -4, -4, -5, -5, -4, -4, -3,
)
# fmt: on

_PST: dict[PieceType, tuple[int, ...]] = {
    PieceType.PAWN: PAWN_PST,
    PieceType.KNIGHT: KNIGHT_PST,
    PieceType.BISHOP: BISHOP_PST,
    PieceType.ROOK: ROOK_PST,
    PieceType.QUEEN: QUEEN_PST,
    PieceType.KING: KING_PST,
}


def piece_square_bonus(piece_type: PieceType, color: Color, sq: Square) -> int:
    """Positional bonus; Black reads White's table mirrored vertically."""
    idx = sq if color == Color.WHITE else mirror_square(sq)
    return _PST[piece_type][idx]


def evaluate(position: Position, ai_color: Color) -> int:
    """Static score of *position* from *ai_color*'s point of view."""
    score = 0
    for sq, piece in enumerate(position.board):
        if piece is None:
            continue
        total = PIECE_VALUES[piece.piece_type] + piece_square_bonus(
            piece.piece_type, piece.color, sq
        )
        score += total if piece.color == ai_color else -total

    if is_in_check(position, position.side_to_move):
        score += -CHECK_BONUS if position.side_to_move == ai_color else CHECK_BONUS
    return score


def terminal_score(position: Position, ai_color: Color, ply: int = 0) -> int:
    """Score of a position without legal moves.

    Checkmate is worth ``MATE_SCORE - ply`` to the winner so that shorter
    mates rank higher; stalemate is 0.
    """
    side = position.side_to_move
    if not is_in_check(position, side):
        return 0
    mate = MATE_SCORE - ply
    return -mate if side == ai_color else mate


def is_mate_score(score: int) -> bool:
    return abs(score) >= MATE_THRESHOLD
