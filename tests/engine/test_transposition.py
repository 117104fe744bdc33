"""Tests for the transposition table."""

import pytest

from tinychess.core.move import Move
from tinychess.engine.transposition import DEFAULT_BITS, Bound, TranspositionTable


class TestTranspositionTable:
    def test_default_size(self) -> None:
        assert TranspositionTable().size == 1 << DEFAULT_BITS == 1024

    def test_probe_empty(self) -> None:
        assert TranspositionTable().probe(12345) is None

    def test_store_and_probe(self) -> None:
        tt = TranspositionTable()
        move = Move(12, 28)
        tt.store(0xABCDEF, 3, 42, Bound.EXACT, move)
        entry = tt.probe(0xABCDEF)
        assert entry is not None
        assert (entry.depth, entry.score, entry.bound) == (3, 42, Bound.EXACT)
        assert entry.best_move == move

    def test_key_mismatch_in_same_slot(self) -> None:
        tt = TranspositionTable(bits=4)
        tt.store(0x10, 1, 5, Bound.LOWER, None)
        assert tt.probe(0x20) is None  # same slot, different key

    def test_shallower_same_key_does_not_replace(self) -> None:
        tt = TranspositionTable()
        tt.store(7, 4, 100, Bound.EXACT, None)
        tt.store(7, 2, -50, Bound.UPPER, None)
        entry = tt.probe(7)
        assert entry is not None
        assert entry.depth == 4
        assert entry.score == 100

    def test_equal_depth_replaces(self) -> None:
        tt = TranspositionTable()
        tt.store(7, 4, 100, Bound.EXACT, None)
        tt.store(7, 4, 60, Bound.LOWER, None)
        entry = tt.probe(7)
        assert entry is not None
        assert entry.score == 60

    def test_collision_replaces(self) -> None:
        tt = TranspositionTable(bits=4)
        tt.store(0x10, 9, 1, Bound.EXACT, None)
        tt.store(0x20, 1, 2, Bound.EXACT, None)
        assert tt.probe(0x10) is None
        entry = tt.probe(0x20)
        assert entry is not None
        assert entry.score == 2

    def test_len_and_clear(self) -> None:
        tt = TranspositionTable()
        tt.store(1, 1, 0, Bound.EXACT, None)
        tt.store(2, 1, 0, Bound.EXACT, None)
        assert len(tt) == 2
        tt.clear()
        assert len(tt) == 0
        assert tt.size == 1024

    def test_invalid_bits(self) -> None:
        with pytest.raises(ValueError):
            TranspositionTable(bits=0)
