"""GameSession: a position plus the move history that led to it.

Thin stateful wrapper for callers (UI, turn sequencing) that prefer
exceptions over ``None`` checks when a move is rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tinychess.core.enums import Color, GameResult, PieceType
from tinychess.core.move import Move
from tinychess.core.move_generator import generate_legal_moves
from tinychess.core.move_list import MoveList
from tinychess.core.notation.fen import position_to_fen
from tinychess.core.position import Position
from tinychess.core.rules import Rules
from tinychess.core.types import Square
from tinychess.engine.alphabeta import choose_best_move
from tinychess.engine.evaluation import PIECE_VALUES
from tinychess.engine.search import ProgressHook, SearchConfig
from tinychess.errors import IllegalMoveError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveChoices:
    """Moves matching a from/to square pair picked on a board."""

    move: Move | None = None
    promotions: tuple[Move, ...] = ()

    @property
    def is_promotion(self) -> bool:
        return bool(self.promotions)

    def promotion_to(self, piece_type: PieceType) -> Move | None:
        for move in self.promotions:
            if move.promotion == piece_type:
                return move
        return None


@dataclass
class GameSession:
    """Holds the current position and the moves played from the start."""

    position: Position = field(default_factory=Position.start_position)
    history: list[Move] = field(default_factory=list, init=False)

    @classmethod
    def new(cls) -> GameSession:
        return cls()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def ply_count(self) -> int:
        return len(self.history)

    def legal_moves(self) -> MoveList:
        return generate_legal_moves(self.position)

    def find_moves(self, from_sq: Square, to_sq: Square) -> MoveChoices:
        """Legal moves from *from_sq* to *to_sq*.

        A pawn reaching the last rank yields the four promotion variants
        instead of a single move.
        """
        plain: Move | None = None
        promotions: list[Move] = []
        for move in self.legal_moves():
            if move.from_sq != from_sq or move.to_sq != to_sq:
                continue
            if move.promotion is None:
                plain = move
            else:
                promotions.append(move)
        return MoveChoices(plain, tuple(promotions))

    def material_scores(self) -> tuple[int, int]:
        """Total material (white, black) in centipawns."""
        scores = [0, 0]
        for piece in self.position.board:
            if piece is not None:
                scores[int(piece.color)] += PIECE_VALUES[piece.piece_type]
        return scores[0], scores[1]

    def material_diff(self, color: Color) -> int:
        """Material balance from *color*'s point of view."""
        white, black = self.material_scores()
        return white - black if color == Color.WHITE else black - white

    def is_checkmated(self, color: Color) -> bool:
        return self.side_to_move == color and Rules.is_checkmate(self.position)

    def result(self) -> GameResult:
        return Rules.game_result(self.position)

    # ── Moves ────────────────────────────────────────────────────────────

    def try_move(self, move: Move) -> bool:
        """Play *move* if legal; return whether it was played."""
        next_position = self.position.make_move(move)
        if next_position is None:
            return False
        self._advance(move, next_position)
        return True

    def play_move(self, move: Move) -> None:
        """Play *move* or raise :class:`IllegalMoveError`."""
        if not self.try_move(move):
            raise IllegalMoveError(move, position_to_fen(self.position))

    def ai_move(
        self,
        config: SearchConfig | None = None,
        progress_hook: ProgressHook | None = None,
    ) -> Move | None:
        """Let the engine choose and play a move for the side to move."""
        move = choose_best_move(
            self.position, self.side_to_move, config, progress_hook
        )
        if move is not None:
            self.play_move(move)
        return move

    def _advance(self, move: Move, next_position: Position) -> None:
        self.position = next_position
        self.history.append(move)
        _LOGGER.debug("Played %s (ply %d)", move, len(self.history))

        result = Rules.game_result(next_position)
        if result != GameResult.IN_PROGRESS:
            _LOGGER.info(
                "Game over after %d plies: %s", len(self.history), result.name
            )
