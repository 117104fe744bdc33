"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from tinychess.core import Position, generate_legal_moves

    pos = Position.start_position()
    for move in generate_legal_moves(pos):
        print(move, pos.make_move(move) is not None)
"""

from tinychess.core.applicator import apply_move, make_move
from tinychess.core.attacks import is_in_check, is_square_attacked
from tinychess.core.enums import CastlingRights, Color, GameResult, PieceType
from tinychess.core.move import Move
from tinychess.core.move_generator import (
    MoveGenerator,
    generate_legal_moves,
    generate_pseudo_legal,
)
from tinychess.core.move_list import MAX_MOVES, MoveList
from tinychess.core.notation import (
    STARTING_FEN,
    parse_uci,
    play_uci,
    position_from_fen,
    position_to_fen,
)
from tinychess.core.piece import Piece
from tinychess.core.position import Position
from tinychess.core.rules import Rules
from tinychess.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)
from tinychess.core.zobrist import position_hash

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "MAX_MOVES",
    "Move",
    "MoveGenerator",
    "MoveList",
    "Piece",
    "Position",
    "Rules",
    # Operations
    "apply_move",
    "generate_legal_moves",
    "generate_pseudo_legal",
    "is_in_check",
    "is_square_attacked",
    "make_move",
    "position_hash",
    # Notation
    "STARTING_FEN",
    "parse_uci",
    "play_uci",
    "position_from_fen",
    "position_to_fen",
]
