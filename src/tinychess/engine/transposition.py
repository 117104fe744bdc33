"""Fixed-size transposition table with depth-preferred replacement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinychess.core.move import Move

DEFAULT_BITS = 10  # 1024 slots


class Bound(IntEnum):
    """How a stored score relates to the true score."""

    EXACT = 0
    LOWER = 1  # fail-high: true score >= stored
    UPPER = 2  # fail-low: true score <= stored


@dataclass(slots=True)
class TTEntry:
    key: int
    depth: int
    score: int
    bound: Bound
    best_move: Move | None


class TranspositionTable:
    """Direct-mapped cache from position hash to search result.

    A slot holds one entry. Storing replaces it when the key differs or
    the new depth is at least the stored depth.
    """

    __slots__ = ("_slots", "_mask")

    def __init__(self, bits: int = DEFAULT_BITS) -> None:
        if bits < 1:
            raise ValueError("Transposition table needs at least 1 index bit")
        self._slots: list[TTEntry | None] = [None] * (1 << bits)
        self._mask = (1 << bits) - 1

    @property
    def size(self) -> int:
        return len(self._slots)

    def probe(self, key: int) -> TTEntry | None:
        entry = self._slots[key & self._mask]
        if entry is not None and entry.key == key:
            return entry
        return None

    def store(
        self,
        key: int,
        depth: int,
        score: int,
        bound: Bound,
        best_move: Move | None,
    ) -> None:
        idx = key & self._mask
        existing = self._slots[idx]
        if existing is None or existing.key != key or depth >= existing.depth:
            self._slots[idx] = TTEntry(key, depth, score, bound, best_move)

    def clear(self) -> None:
        self._slots = [None] * len(self._slots)

    def __len__(self) -> int:
        return sum(1 for entry in self._slots if entry is not None)
