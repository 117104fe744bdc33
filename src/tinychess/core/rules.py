"""Game-ending rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tinychess.core.attacks import is_in_check
from tinychess.core.enums import Color, GameResult
from tinychess.core.move_generator import generate_legal_moves

if TYPE_CHECKING:
    from tinychess.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Only checkmate and stalemate end a game here. The half-move clock is
    tracked by :class:`Position` but no draw is declared from it.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position, position.side_to_move)

    @staticmethod
    def has_legal_moves(position: Position) -> bool:
        return len(generate_legal_moves(position)) > 0

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.is_in_check(position) and not Rules.has_legal_moves(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not Rules.is_in_check(position) and not Rules.has_legal_moves(position)

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Result for the side to move; ``IN_PROGRESS`` while it can move."""
        if Rules.has_legal_moves(position):
            return GameResult.IN_PROGRESS
        if not Rules.is_in_check(position):
            return GameResult.DRAW
        if position.side_to_move == Color.WHITE:
            return GameResult.BLACK_WINS
        return GameResult.WHITE_WINS
