"""Tests for the opening book."""

import logging

import pytest

from tinychess.core.notation import STARTING_FEN, play_uci, position_from_fen
from tinychess.core.position import Position
from tinychess.engine.book import (
    DEFAULT_LINES,
    BookLine,
    OpeningBook,
    book_move,
)


class TestBookMove:
    def test_start_position(self) -> None:
        assert str(book_move(Position.start_position())) == "e2e4"

    def test_start_from_fen_matches_by_value(self) -> None:
        assert str(book_move(position_from_fen(STARTING_FEN))) == "e2e4"

    def test_italian_bishop(self) -> None:
        pos = play_uci(Position.start_position(), "e2e4", "e7e5", "g1f3", "b8c6")
        assert str(book_move(pos)) == "f1c4"

    def test_black_reply(self) -> None:
        pos = play_uci(Position.start_position(), "e2e4")
        assert str(book_move(pos)) == "e7e5"

    def test_later_line_used_when_earlier_diverges(self) -> None:
        pos = play_uci(Position.start_position(), "d2d4")
        assert str(book_move(pos)) == "d7d5"
        pos = play_uci(Position.start_position(), "e2e4", "c7c5")
        assert str(book_move(pos)) == "g1f3"

    def test_ruy_lopez_castles(self) -> None:
        pos = play_uci(
            Position.start_position(),
            "e2e4", "e7e5", "g1f3", "b8c6", "f1b5", "a7a6", "b5a4", "g8f6",
        )
        move = book_move(pos)
        assert str(move) == "e1g1"
        assert move is not None and move.is_castling

    def test_out_of_book(self) -> None:
        pos = play_uci(Position.start_position(), "a2a3")
        assert book_move(pos) is None

    def test_end_of_line_is_out_of_book(self) -> None:
        line = DEFAULT_LINES[0]
        pos = play_uci(Position.start_position(), *line.moves)
        assert book_move(pos) is None

    def test_same_board_different_clock_is_out_of_book(self) -> None:
        pos = play_uci(Position.start_position(), "g1f3", "g8f6", "f3g1", "f6g8")
        assert book_move(pos) is None

    def test_every_default_line_replays(self) -> None:
        for line in DEFAULT_LINES:
            play_uci(Position.start_position(), *line.moves)


class TestCustomBook:
    def test_first_matching_line_wins(self) -> None:
        book = OpeningBook(
            (
                BookLine("first", ("e2e4", "c7c5")),
                BookLine("second", ("e2e4", "e7e6")),
            )
        )
        pos = play_uci(Position.start_position(), "e2e4")
        assert str(book.lookup(pos)) == "c7c5"

    def test_broken_line_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        book = OpeningBook(
            (
                BookLine("broken", ("e2e4", "e2e4")),
                BookLine("sound", ("e2e4", "e7e5", "g1f3")),
            )
        )
        pos = play_uci(Position.start_position(), "e2e4", "e7e5")
        with caplog.at_level(logging.WARNING, logger="tinychess.engine.book"):
            assert str(book.lookup(pos)) == "g1f3"
            assert str(book.lookup(pos)) == "g1f3"
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "broken" in warnings[0].getMessage()

    def test_empty_book(self) -> None:
        assert OpeningBook(()).lookup(Position.start_position()) is None
