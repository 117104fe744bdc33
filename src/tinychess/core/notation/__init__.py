"""Notation package: FEN and UCI parsing and serialization."""

from tinychess.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from tinychess.core.notation.uci import parse_uci, play_uci

__all__ = [
    "STARTING_FEN",
    "parse_uci",
    "play_uci",
    "position_from_fen",
    "position_to_fen",
]
