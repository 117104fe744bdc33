"""Attack detection: is a square attacked, is a side in check.

Offsets are flat square deltas. Every lookup table below is built once by
walking those deltas and rejecting any step whose file change does not
match the direction, which removes rank-wrapping artefacts (h1 + 1 = a2).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from tinychess.core.enums import Color, PieceType
from tinychess.core.types import Square, file_distance, file_of

if TYPE_CHECKING:
    from tinychess.core.piece import Piece
    from tinychess.core.position import Position

KNIGHT_OFFSETS: tuple[int, ...] = (17, 15, 10, 6, -17, -15, -10, -6)
KING_OFFSETS: tuple[int, ...] = (1, -1, 8, -8, 9, 7, -7, -9)

# (flat offset, file step per square)
ROOK_DIRS: tuple[tuple[int, int], ...] = ((8, 0), (-8, 0), (1, 1), (-1, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((9, 1), (7, -1), (-7, 1), (-9, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


def knight_wraps(from_sq: Square, to_sq: Square) -> bool:
    df = file_distance(from_sq, to_sq)
    return df == 0 or df > 2


def king_wraps(from_sq: Square, to_sq: Square) -> bool:
    return file_distance(from_sq, to_sq) > 1


# -- Precomputed lookup tables ---------------------------------------------


def _build_leaps(
    offsets: tuple[int, ...],
    wraps: Callable[[Square, Square], bool],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        leaps: list[Square] = []
        for off in offsets:
            to_sq = sq + off
            if 0 <= to_sq < 64 and not wraps(sq, to_sq):
                leaps.append(to_sq)
        targets.append(tuple(leaps))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for offset, file_step in directions:
            ray: list[Square] = []
            prev = sq
            cur = sq + offset
            while 0 <= cur < 64 and file_of(cur) - file_of(prev) == file_step:
                ray.append(cur)
                prev = cur
                cur += offset
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_sources(color: Color) -> tuple[tuple[Square, ...], ...]:
    """For each square, the squares a *color* pawn would capture it from."""
    back = -8 * color.pawn_direction
    sources: list[tuple[Square, ...]] = []
    for sq in range(64):
        found: list[Square] = []
        for side in (-1, 1):
            from_sq = sq + back + side
            if 0 <= from_sq < 64 and file_distance(sq, from_sq) == 1:
                found.append(from_sq)
        sources.append(tuple(found))
    return tuple(sources)


KNIGHT_TARGETS = _build_leaps(KNIGHT_OFFSETS, knight_wraps)
KING_TARGETS = _build_leaps(KING_OFFSETS, king_wraps)
ROOK_RAYS = _build_rays(ROOK_DIRS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)
_PAWN_SOURCES = (_build_pawn_sources(Color.WHITE), _build_pawn_sources(Color.BLACK))

_ROOK_LIKE = (PieceType.ROOK, PieceType.QUEEN)
_BISHOP_LIKE = (PieceType.BISHOP, PieceType.QUEEN)


def _ray_hits(
    board: tuple[Piece | None, ...],
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    kinds: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for from_sq in ray:
            piece = board[from_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in kinds:
                return True
            break
    return False


def is_square_attacked(position: Position, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    board = position.board

    for from_sq in _PAWN_SOURCES[int(by_color)][sq]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    for from_sq in KNIGHT_TARGETS[sq]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    if _ray_hits(board, ROOK_RAYS[sq], by_color, _ROOK_LIKE):
        return True
    if _ray_hits(board, BISHOP_RAYS[sq], by_color, _BISHOP_LIKE):
        return True

    for from_sq in KING_TARGETS[sq]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KING
        ):
            return True

    return False


def is_in_check(position: Position, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without a *color* king reports ``False``.
    """
    king_sq = position.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(position, king_sq, color.opposite)
