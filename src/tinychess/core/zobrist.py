"""Zobrist position hashing with keys derived on demand."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from tinychess.core.enums import Color

if TYPE_CHECKING:
    from tinychess.core.position import Position

_MASK_64: Final = 0xFFFFFFFFFFFFFFFF
_GOLDEN_GAMMA: Final = 0x9E3779B97F4A7C15
_MIX_1: Final = 0xBF58476D1CE4E5B9
_MIX_2: Final = 0x94D049BB133111EB

SIDE_TO_MOVE_KEY: Final = 0x9E3779B97F4A7C15


def _splitmix64(state: int) -> int:
    """Deterministic 64-bit avalanche mixer."""
    z = (state + _MIX_1) & _MASK_64
    z ^= z >> 30
    z = (z * _MIX_1) & _MASK_64
    z ^= z >> 27
    z = (z * _MIX_2) & _MASK_64
    return z ^ (z >> 31)


def piece_square_key(piece_index: int, sq: int) -> int:
    """Key for piece index 0–11 standing on *sq*; computed, not looked up."""
    return _splitmix64((piece_index << 8) ^ sq ^ _GOLDEN_GAMMA)


def position_hash(position: Position) -> int:
    """64-bit fingerprint of the placement and side to move.

    Castling rights, en passant and clocks are not part of the key.
    """
    key = 0
    for sq, piece in enumerate(position.board):
        if piece is not None:
            key ^= piece_square_key(piece.index, sq)
    if position.side_to_move == Color.WHITE:
        key ^= SIDE_TO_MOVE_KEY
    return key
