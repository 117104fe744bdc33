"""Tests for GameSession."""

import logging

import pytest

from tinychess.core.enums import Color, GameResult, PieceType
from tinychess.core.move import Move
from tinychess.core.notation import position_from_fen
from tinychess.core.position import Position
from tinychess.core.types import E2, E4, E5, E7, parse_square
from tinychess.engine.search import SearchConfig
from tinychess.errors import IllegalMoveError, TinyChessError
from tinychess.game import GameSession


class TestSessionSetup:
    def test_new_starts_at_initial_position(self) -> None:
        session = GameSession.new()
        assert session.position == Position.start_position()
        assert session.side_to_move == Color.WHITE
        assert session.history == []
        assert session.result() == GameResult.IN_PROGRESS

    def test_custom_position(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        session = GameSession(pos)
        assert session.side_to_move == Color.BLACK

    def test_legal_moves(self) -> None:
        assert len(GameSession.new().legal_moves()) == 20


class TestPlayingMoves:
    def test_play_move(self) -> None:
        session = GameSession.new()
        session.play_move(Move(E2, E4))
        assert session.side_to_move == Color.BLACK
        assert session.history == [Move(E2, E4)]
        assert session.ply_count == 1

    def test_play_illegal_move_raises(self) -> None:
        session = GameSession.new()
        with pytest.raises(IllegalMoveError) as info:
            session.play_move(Move(E2, E5))
        assert info.value.move == Move(E2, E5)
        assert info.value.fen is not None and info.value.fen.startswith("rnbqkbnr")
        assert session.position == Position.start_position()
        assert session.history == []

    def test_illegal_move_error_is_value_error(self) -> None:
        session = GameSession.new()
        with pytest.raises(ValueError):
            session.play_move(Move(E7, E5))
        with pytest.raises(TinyChessError):
            session.play_move(Move(E7, E5))

    def test_try_move(self) -> None:
        session = GameSession.new()
        assert not session.try_move(Move(E7, E5))
        assert session.try_move(Move(E2, E4))
        assert session.try_move(Move(E7, E5))
        assert session.ply_count == 2

    def test_checkmate_detected(self) -> None:
        session = GameSession.new()
        for a, b in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            session.play_move(Move(parse_square(a), parse_square(b)))
        assert session.is_checkmated(Color.WHITE)
        assert not session.is_checkmated(Color.BLACK)
        assert session.result() == GameResult.BLACK_WINS

    def test_game_over_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        session = GameSession(position_from_fen("6k1/8/6K1/8/8/8/8/Q7 w - - 0 1"))
        with caplog.at_level(logging.INFO, logger="tinychess.game.session"):
            session.play_move(Move(parse_square("a1"), parse_square("a8")))
        assert any("Game over" in r.getMessage() for r in caplog.records)


class TestFindMoves:
    def test_plain_move(self) -> None:
        choices = GameSession.new().find_moves(E2, E4)
        assert choices.move == Move(E2, E4)
        assert not choices.is_promotion

    def test_no_match(self) -> None:
        choices = GameSession.new().find_moves(E2, E5)
        assert choices.move is None
        assert choices.promotions == ()

    def test_promotion_variants(self) -> None:
        session = GameSession(position_from_fen("8/P6k/8/8/8/8/8/K7 w - - 0 1"))
        choices = session.find_moves(parse_square("a7"), parse_square("a8"))
        assert choices.move is None
        assert choices.is_promotion
        assert len(choices.promotions) == 4
        knight = choices.promotion_to(PieceType.KNIGHT)
        assert knight is not None and str(knight) == "a7a8n"
        assert choices.promotion_to(PieceType.KING) is None


class TestMaterial:
    def test_start_is_even(self) -> None:
        session = GameSession.new()
        white, black = session.material_scores()
        assert white == black == 8 * 100 + 2 * 320 + 2 * 330 + 2 * 500 + 900
        assert session.material_diff(Color.WHITE) == 0

    def test_diff_after_capture(self) -> None:
        session = GameSession(position_from_fen("4k3/8/8/3q4/4P3/8/8/4K3 w - - 0 1"))
        session.play_move(Move(parse_square("e4"), parse_square("d5")))
        assert session.material_scores() == (100, 0)
        assert session.material_diff(Color.WHITE) == 100
        assert session.material_diff(Color.BLACK) == -100


class TestAiMove:
    def test_plays_book_move(self) -> None:
        session = GameSession.new()
        move = session.ai_move(SearchConfig(max_depth=2))
        assert str(move) == "e2e4"
        assert session.history == [move]
        assert session.side_to_move == Color.BLACK

    def test_plays_searched_move(self) -> None:
        session = GameSession(position_from_fen("6k1/8/6K1/8/8/8/8/Q7 w - - 0 1"))
        move = session.ai_move(SearchConfig(max_depth=2))
        assert move is not None
        assert session.result() == GameResult.WHITE_WINS

    def test_no_move_when_game_over(self) -> None:
        session = GameSession(position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1"))
        assert session.ai_move(SearchConfig(max_depth=1)) is None
        assert session.history == []
        assert session.result() == GameResult.DRAW

    def test_progress_hook_forwarded(self) -> None:
        calls: list[None] = []
        session = GameSession(position_from_fen("4k3/8/8/8/8/8/8/4K2R w - - 0 1"))
        session.ai_move(SearchConfig(max_depth=1), lambda: calls.append(None))
        assert calls
