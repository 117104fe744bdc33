"""Move ordering: MVV/LVA-style heuristic and an in-place insertion sort."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from tinychess.engine.evaluation import PIECE_VALUES

if TYPE_CHECKING:
    from tinychess.core.move import Move
    from tinychess.core.move_list import MoveList
    from tinychess.core.position import Position

HINT_SCORE: Final = 10_000
CASTLING_BONUS: Final = 50
EN_PASSANT_BONUS: Final = 800
PROMOTION_BONUS: Final = 400
_UNKNOWN_ATTACKER_VALUE: Final = 100


def move_heuristic(position: Position, move: Move, hint: Move | None = None) -> int:
    """Ordering score of *move*; higher means search earlier."""
    if hint is not None and move == hint:
        return HINT_SCORE

    score = 0
    if move.is_castling:
        score += CASTLING_BONUS

    if move.is_en_passant:
        score += EN_PASSANT_BONUS
    else:
        victim = position.board[move.to_sq]
        if victim is not None:
            attacker = position.board[move.from_sq]
            attacker_value = (
                PIECE_VALUES[attacker.piece_type]
                if attacker is not None
                else _UNKNOWN_ATTACKER_VALUE
            )
            score += PIECE_VALUES[victim.piece_type] * 10 - attacker_value

    if move.promotion is not None:
        score += PIECE_VALUES[move.promotion] + PROMOTION_BONUS

    return score


def is_noisy(position: Position, move: Move) -> bool:
    """Captures (including en passant) and promotions."""
    return (
        move.is_en_passant
        or move.promotion is not None
        or position.board[move.to_sq] is not None
    )


def sort_moves(
    position: Position,
    moves: MoveList,
    hint: Move | None = None,
    descending: bool = True,
) -> None:
    """Stable insertion sort of *moves* by :func:`move_heuristic`."""
    keys = [move_heuristic(position, move, hint) for move in moves]
    for i in range(1, len(moves)):
        move = moves[i]
        key = keys[i]
        j = i
        while j > 0 and (keys[j - 1] < key if descending else keys[j - 1] > key):
            moves[j] = moves[j - 1]
            keys[j] = keys[j - 1]
            j -= 1
        moves[j] = move
        keys[j] = key
