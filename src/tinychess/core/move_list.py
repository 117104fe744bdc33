"""Bounded, ordered move container."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from tinychess.core.move import Move

MAX_MOVES = 218  # upper bound of the chess branching factor


class MoveList:
    """Ordered sequence of at most :data:`MAX_MOVES` moves.

    Pushes beyond capacity are dropped without error; no legal chess
    position reaches the bound.
    """

    __slots__ = ("_moves",)

    capacity = MAX_MOVES

    def __init__(self, moves: list[Move] | None = None) -> None:
        self._moves: list[Move] = []
        for move in moves or ():
            self.push(move)

    def push(self, move: Move) -> None:
        if len(self._moves) < MAX_MOVES:
            self._moves.append(move)

    def retain(self, keep: Callable[[Move], bool]) -> None:
        """Drop every move for which *keep* returns false, preserving order."""
        self._moves = [move for move in self._moves if keep(move)]

    def to_list(self) -> list[Move]:
        return self._moves.copy()

    # -- Sequence protocol --------------------------------------------------

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> Move:
        return self._moves[index]

    def __setitem__(self, index: int, move: Move) -> None:
        self._moves[index] = move

    def __contains__(self, move: object) -> bool:
        return move in self._moves

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MoveList):
            return self._moves == other._moves
        if isinstance(other, list):
            return self._moves == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"MoveList([{', '.join(str(m) for m in self._moves)}])"
