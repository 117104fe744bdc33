"""Opening book: fixed move sequences matched by replay from the start."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tinychess.core.move import Move
from tinychess.core.notation.uci import parse_uci
from tinychess.core.position import Position

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BookLine:
    """A named sequence of UCI moves played from the initial position."""

    name: str
    moves: tuple[str, ...]


# Line order is the lookup priority.
# fmt: off
DEFAULT_LINES: tuple[BookLine, ...] = (
    BookLine(
        "Italian Game",
        ("e2e4", "e7e5", "g1f3", "b8c6", "f1c4", "f8c5", "c2c3", "g8f6"),
    ),
    BookLine(
        "Ruy Lopez",
        (
            "e2e4", "e7e5", "g1f3", "b8c6", "f1b5",
            "a7a6", "b5a4", "g8f6", "e1g1", "f8e7",
        ),
    ),
    BookLine(
        "Queen's Gambit Declined",
        ("d2d4", "d7d5", "c2c4", "e7e6", "b1c3", "g8f6", "c1g5"),
    ),
    BookLine(
        "Sicilian Najdorf",
        (
            "e2e4", "c7c5", "g1f3", "d7d6", "d2d4",
            "c5d4", "f3d4", "g8f6", "b1c3", "a7a6",
        ),
    ),
    BookLine(
        "Caro-Kann",
        ("e2e4", "c7c6", "d2d4", "d7d5", "b1c3", "d5e4", "c3e4", "c8f5"),
    ),
)
# fmt: on


class OpeningBook:
    """Looks positions up by replaying each line and comparing by value."""

    __slots__ = ("_lines", "_broken")

    def __init__(self, lines: tuple[BookLine, ...] = DEFAULT_LINES) -> None:
        self._lines = lines
        self._broken: set[str] = set()

    @property
    def lines(self) -> tuple[BookLine, ...]:
        return self._lines

    def lookup(self, position: Position) -> Move | None:
        """Next book move for *position*, or ``None`` when out of book."""
        for line in self._lines:
            move = self._match_prefix(position, line)
            if move is not None:
                _LOGGER.debug("Book hit (%s): %s", line.name, move)
                return move
        return None

    def _match_prefix(self, position: Position, line: BookLine) -> Move | None:
        sim = Position.start_position()
        for text in line.moves:
            try:
                move = parse_uci(sim, text)
            except ValueError:
                if line.name not in self._broken:
                    self._broken.add(line.name)
                    _LOGGER.warning(
                        "Book line %r does not replay at %r", line.name, text
                    )
                return None
            if sim == position:
                return move
            sim = sim.apply(move)
        return None


DEFAULT_BOOK = OpeningBook()


def book_move(position: Position) -> Move | None:
    """Book reply for *position* from the built-in lines."""
    return DEFAULT_BOOK.lookup(position)
