"""Qt bridge that runs engine searches for a GUI event loop.

The worker performs the search synchronously in whatever thread it is
moved to; progress ticks from the search are re-emitted as a signal.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from tinychess.core.enums import Color
from tinychess.core.position import Position
from tinychess.engine.alphabeta import AlphaBetaEngine
from tinychess.engine.search import SearchConfig

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand."""

    best_move_ready = pyqtSignal(int, object)
    search_no_move = pyqtSignal(int)
    search_progress = pyqtSignal(int, int)
    search_error = pyqtSignal(int, str)

    def __init__(
        self,
        *,
        max_depth: int = 6,
        node_limit: int | None = 20_000,
    ) -> None:
        super().__init__()
        self._engine = AlphaBetaEngine()
        self._config = SearchConfig(max_depth=max_depth, node_limit=node_limit)

    @property
    def config(self) -> SearchConfig:
        return self._config

    @pyqtSlot(object, object, int)
    def request_move(self, position_obj: object, side: object, request_id: int) -> None:
        """Search for *side*'s best move in *position_obj* and emit the result."""
        if not isinstance(position_obj, Position) or not isinstance(side, Color):
            self.search_error.emit(request_id, "Engine received invalid request")
            return

        ticks = 0

        def _tick() -> None:
            nonlocal ticks
            ticks += 1
            self.search_progress.emit(request_id, ticks)

        try:
            result = self._engine.search(position_obj, side, self._config, _tick)
        except Exception as exc:
            _LOGGER.warning("Engine search %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return
        self.best_move_ready.emit(request_id, result.best_move)

    @pyqtSlot(int, int)
    def set_config(self, max_depth: int, node_limit: int) -> None:
        """Update search limits (takes effect on the next search).

        A non-positive *node_limit* disables the node budget.
        """
        self._config = SearchConfig(
            max_depth=max_depth,
            node_limit=node_limit if node_limit > 0 else None,
        )
