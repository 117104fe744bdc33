"""UCI long-algebraic move text."""

from __future__ import annotations

from tinychess.core.move import Move
from tinychess.core.move_generator import generate_legal_moves
from tinychess.core.position import Position


def parse_uci(position: Position, text: str) -> Move:
    """Resolve UCI text such as ``e2e4`` or ``e7e8q`` to a legal move.

    The returned move carries the en-passant and castling flags of the
    generated move, so it can be compared against generator output.
    """
    text = text.strip().lower()
    for move in generate_legal_moves(position):
        if move.uci == text:
            return move
    raise ValueError(f"Illegal or malformed UCI move {text!r} in this position")


def play_uci(position: Position, *moves: str) -> Position:
    """Apply a sequence of UCI moves, returning the final position."""
    for text in moves:
        position = position.apply(parse_uci(position, text))
    return position
