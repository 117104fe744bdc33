"""Tests for Qt engine bridge worker."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6")

from PyQt6.QtTest import QSignalSpy  # noqa: E402

from tinychess.core.enums import Color  # noqa: E402
from tinychess.core.notation import STARTING_FEN, position_from_fen  # noqa: E402
from tinychess.core.position import Position  # noqa: E402
from tinychess.engine.qt_bridge import EngineWorker  # noqa: E402
from tinychess.engine.search import (  # noqa: E402
    ProgressHook,
    SearchConfig,
    SearchResult,
)


class _FailingEngine:
    def search(
        self,
        _position: Position,
        _side: Color,
        _config: SearchConfig | None = None,
        progress_hook: ProgressHook | None = None,
    ) -> SearchResult:
        del progress_hook
        raise RuntimeError("boom")


class TestEngineWorker:
    def test_emits_book_move(self) -> None:
        worker = EngineWorker()
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(position_from_fen(STARTING_FEN), Color.WHITE, 3)

        assert len(best_moves) == 1
        assert best_moves[0][0] == 3
        assert str(best_moves[0][1]) == "e2e4"

    def test_emits_progress_ticks(self) -> None:
        worker = EngineWorker(max_depth=1)
        worker._config = SearchConfig(max_depth=1, use_book=False)
        progress = QSignalSpy(worker.search_progress)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(position_from_fen(STARTING_FEN), Color.WHITE, 5)

        assert len(best_moves) == 1
        assert len(progress) == 21
        assert progress[-1][0] == 5
        assert progress[-1][1] == 21

    def test_emits_no_move_for_wrong_side(self) -> None:
        worker = EngineWorker()
        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(position_from_fen(STARTING_FEN), Color.BLACK, 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0

    def test_emits_error_for_invalid_request(self) -> None:
        worker = EngineWorker()
        errors = QSignalSpy(worker.search_error)

        worker.request_move("not a position", Color.WHITE, 2)

        assert len(errors) == 1
        assert errors[0][0] == 2

    def test_emits_error_when_search_raises(self) -> None:
        worker = EngineWorker()
        worker._engine = _FailingEngine()  # type: ignore[assignment]
        errors = QSignalSpy(worker.search_error)

        worker.request_move(position_from_fen(STARTING_FEN), Color.WHITE, 9)

        assert len(errors) == 1
        assert errors[0][1] == "boom"

    def test_set_config(self) -> None:
        worker = EngineWorker()
        worker.set_config(3, 0)
        assert worker.config.max_depth == 3
        assert worker.config.node_limit is None
        worker.set_config(4, 1_000)
        assert worker.config.node_limit == 1_000
