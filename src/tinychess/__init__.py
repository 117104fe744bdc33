"""tinychess — chess rules engine with a bounded alpha-beta move picker."""

from tinychess.core import Color, Move, MoveList, PieceType, Position
from tinychess.core import generate_legal_moves, is_in_check, make_move
from tinychess.engine import SearchConfig, SearchResult, choose_best_move
from tinychess.errors import ConfigError, IllegalMoveError, TinyChessError

__version__ = "0.1.0"

__all__ = [
    "Color",
    "ConfigError",
    "IllegalMoveError",
    "Move",
    "MoveList",
    "PieceType",
    "Position",
    "SearchConfig",
    "SearchResult",
    "TinyChessError",
    "choose_best_move",
    "generate_legal_moves",
    "is_in_check",
    "make_move",
]
