"""Iterative-deepening alpha-beta search with quiescence.

Scores are always from the searching side's point of view: nodes where
that side is to move maximize, the others minimize.
"""

from __future__ import annotations

import logging
from typing import Final

from tinychess.core.applicator import apply_move
from tinychess.core.enums import Color
from tinychess.core.move import Move
from tinychess.core.move_generator import generate_legal_moves
from tinychess.core.move_list import MoveList
from tinychess.core.position import Position
from tinychess.core.zobrist import position_hash
from tinychess.engine.book import DEFAULT_BOOK, OpeningBook
from tinychess.engine.evaluation import evaluate, terminal_score
from tinychess.engine.ordering import is_noisy, sort_moves
from tinychess.engine.search import (
    ProgressHook,
    SearchConfig,
    SearchResult,
    no_progress,
)
from tinychess.engine.transposition import Bound, TranspositionTable

_LOGGER = logging.getLogger(__name__)

_INF_SCORE: Final = 1_000_000


class AlphaBetaEngine:
    """Single-threaded searcher bounded by depth and a node budget.

    Each :meth:`search` call starts from an empty transposition table, so
    an engine instance carries no state between calls.
    """

    __slots__ = (
        "_book",
        "_ai_color",
        "_config",
        "_node_limit",
        "_nodes",
        "_progress",
        "_truncated",
        "_tt",
    )

    def __init__(self, book: OpeningBook | None = None) -> None:
        self._book = book if book is not None else DEFAULT_BOOK
        self._ai_color = Color.WHITE
        self._config = SearchConfig()
        self._node_limit: int | None = None
        self._nodes = 0
        self._progress: ProgressHook = no_progress
        self._truncated = False
        self._tt = TranspositionTable()

    @property
    def nodes(self) -> int:
        return self._nodes

    def search(
        self,
        position: Position,
        side: Color,
        config: SearchConfig | None = None,
        progress_hook: ProgressHook | None = None,
    ) -> SearchResult:
        config = config or SearchConfig()
        self._ai_color = side
        self._config = config
        self._node_limit = config.effective_node_limit
        self._nodes = 0
        self._progress = progress_hook or no_progress
        self._tt.clear()

        if position.side_to_move != side:
            return SearchResult(None, 0, 0, 0)

        if config.use_book:
            book_reply = self._book.lookup(position)
            if book_reply is not None:
                return SearchResult(book_reply, 0, 0, 0, from_book=True)

        root_moves = generate_legal_moves(position)
        if not root_moves:
            return SearchResult(None, terminal_score(position, side), 0, 0)

        root_key = position_hash(position)
        best_move: Move | None = None
        best_score = -_INF_SCORE
        completed_depth = 0

        for depth in range(1, config.effective_depth + 1):
            self._truncated = False
            self._progress()
            entry = self._tt.probe(root_key)
            hint = entry.best_move if entry is not None else None
            sort_moves(position, root_moves, hint, descending=True)

            score, move = self._search_root(position, root_moves, depth)
            if move is not None:
                best_move = move
                best_score = score
                if not self._truncated:
                    completed_depth = depth
                self._tt.store(root_key, depth, score, Bound.EXACT, move)
                _LOGGER.debug(
                    "depth %d: best %s score %d nodes %d",
                    depth,
                    move,
                    score,
                    self._nodes,
                )

            if self._exhausted():
                _LOGGER.debug(
                    "Node budget of %s reached at depth %d", self._node_limit, depth
                )
                break

        if best_move is None:
            best_move = root_moves[0]
            best_score = evaluate(position, side)

        return SearchResult(best_move, best_score, completed_depth, self._nodes)

    # -- Search internals ---------------------------------------------------

    def _search_root(
        self,
        position: Position,
        root_moves: MoveList,
        depth: int,
    ) -> tuple[int, Move | None]:
        best_score = -_INF_SCORE
        best_move: Move | None = None
        alpha = -_INF_SCORE
        beta = _INF_SCORE

        for move in root_moves:
            if self._budget_spent():
                break
            self._progress()
            child = apply_move(position, move)
            score = self._alphabeta(child, depth - 1, alpha, beta, 1)
            if score > best_score:
                best_score = score
                best_move = move
            if best_score > alpha:
                alpha = best_score

        return best_score, best_move

    def _alphabeta(
        self,
        position: Position,
        depth: int,
        alpha: int,
        beta: int,
        ply: int,
    ) -> int:
        ai_color = self._ai_color
        if self._budget_spent():
            return evaluate(position, ai_color)
        self._nodes += 1

        alpha_orig = alpha
        beta_orig = beta
        key = position_hash(position)
        entry = self._tt.probe(key)
        if entry is not None and entry.depth >= depth:
            if entry.bound == Bound.EXACT:
                return entry.score
            if entry.bound == Bound.LOWER:
                alpha = max(alpha, entry.score)
            else:
                beta = min(beta, entry.score)
            if alpha >= beta:
                return entry.score

        if depth <= 0:
            return self._quiesce(position, alpha, beta, ply, 0)

        moves = generate_legal_moves(position)
        if not moves:
            return terminal_score(position, ai_color, ply)

        maximizing = position.side_to_move == ai_color
        hint = entry.best_move if entry is not None else None
        sort_moves(position, moves, hint, descending=maximizing)

        best = -_INF_SCORE if maximizing else _INF_SCORE
        best_move: Move | None = None
        for index, move in enumerate(moves):
            child = apply_move(position, move)
            score = self._alphabeta(child, depth - 1, alpha, beta, ply + 1)
            if maximizing:
                if score > best:
                    best = score
                    best_move = move
                alpha = max(alpha, best)
            else:
                if score < best:
                    best = score
                    best_move = move
                beta = min(beta, best)
            if beta <= alpha:
                break
            if index + 1 < len(moves) and self._budget_spent():
                break

        if best <= alpha_orig:
            bound = Bound.UPPER
        elif best >= beta_orig:
            bound = Bound.LOWER
        else:
            bound = Bound.EXACT
        self._tt.store(key, depth, best, bound, best_move)
        return best

    def _quiesce(
        self,
        position: Position,
        alpha: int,
        beta: int,
        ply: int,
        q_depth: int,
    ) -> int:
        ai_color = self._ai_color
        if self._budget_spent():
            return evaluate(position, ai_color)

        moves = generate_legal_moves(position)
        if not moves:
            return terminal_score(position, ai_color, ply)

        stand_pat = evaluate(position, ai_color)

        maximizing = position.side_to_move == ai_color
        if maximizing:
            if stand_pat >= beta:
                return stand_pat
            alpha = max(alpha, stand_pat)
        else:
            if stand_pat <= alpha:
                return stand_pat
            beta = min(beta, stand_pat)

        cap = self._config.quiescence_depth
        if cap is not None and q_depth >= cap:
            return stand_pat

        moves.retain(lambda move: is_noisy(position, move))
        if not moves:
            return stand_pat
        sort_moves(position, moves, None, descending=maximizing)

        best = stand_pat
        for move in moves:
            if self._budget_spent():
                break
            self._nodes += 1
            child = apply_move(position, move)
            score = self._quiesce(child, alpha, beta, ply + 1, q_depth + 1)
            if maximizing:
                best = max(best, score)
                alpha = max(alpha, best)
                if best >= beta:
                    break
            else:
                best = min(best, score)
                beta = min(beta, best)
                if best <= alpha:
                    break
        return best

    def _exhausted(self) -> bool:
        return self._node_limit is not None and self._nodes >= self._node_limit

    def _budget_spent(self) -> bool:
        """Like :meth:`_exhausted`, but records that work was skipped."""
        if self._exhausted():
            self._truncated = True
            return True
        return False


def choose_best_move(
    position: Position,
    side: Color,
    config: SearchConfig | None = None,
    progress_hook: ProgressHook | None = None,
) -> Move | None:
    """Pick a move for *side*, or ``None`` if it is not *side*'s turn or
    *side* has no legal move."""
    return AlphaBetaEngine().search(position, side, config, progress_hook).best_move
