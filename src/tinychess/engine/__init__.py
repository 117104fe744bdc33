"""Chess engine package: alpha-beta search, evaluation and opening book.

The Qt worker bridge lives in :mod:`tinychess.engine.qt_bridge` and is not
imported here, so the engine works without PyQt6 installed.
"""

from tinychess.engine.alphabeta import AlphaBetaEngine, choose_best_move
from tinychess.engine.book import DEFAULT_BOOK, BookLine, OpeningBook, book_move
from tinychess.engine.evaluation import MATE_SCORE, MATE_THRESHOLD, evaluate
from tinychess.engine.search import ProgressHook, SearchConfig, SearchResult
from tinychess.engine.transposition import Bound, TranspositionTable

__all__ = [
    "AlphaBetaEngine",
    "BookLine",
    "Bound",
    "DEFAULT_BOOK",
    "MATE_SCORE",
    "MATE_THRESHOLD",
    "OpeningBook",
    "ProgressHook",
    "SearchConfig",
    "SearchResult",
    "TranspositionTable",
    "book_move",
    "choose_best_move",
    "evaluate",
]
