"""Tests for the bounded MoveList container."""

from tinychess.core.move import Move
from tinychess.core.move_list import MAX_MOVES, MoveList


def _moves(count: int) -> list[Move]:
    return [Move(i % 64, (i + 1) % 64) for i in range(count)]


class TestMoveList:
    def test_push_preserves_order(self) -> None:
        moves = MoveList()
        for move in _moves(5):
            moves.push(move)
        assert moves.to_list() == _moves(5)
        assert len(moves) == 5

    def test_push_beyond_capacity_is_dropped(self) -> None:
        moves = MoveList()
        for move in _moves(MAX_MOVES + 10):
            moves.push(move)
        assert len(moves) == MAX_MOVES
        assert moves[-1] == _moves(MAX_MOVES)[-1]

    def test_constructor_respects_capacity(self) -> None:
        assert len(MoveList(_moves(MAX_MOVES + 1))) == MAX_MOVES

    def test_retain(self) -> None:
        moves = MoveList(_moves(10))
        moves.retain(lambda m: m.from_sq % 2 == 0)
        assert [m.from_sq for m in moves] == [0, 2, 4, 6, 8]

    def test_empty_is_falsy(self) -> None:
        assert not MoveList()
        assert MoveList(_moves(1))

    def test_contains_and_equality(self) -> None:
        moves = MoveList(_moves(3))
        assert Move(1, 2) in moves
        assert Move(5, 6) not in moves
        assert moves == _moves(3)
        assert moves == MoveList(_moves(3))

    def test_to_list_is_a_copy(self) -> None:
        moves = MoveList(_moves(2))
        copy = moves.to_list()
        copy.clear()
        assert len(moves) == 2

    def test_repr_uses_uci(self) -> None:
        assert repr(MoveList([Move(12, 28)])) == "MoveList([e2e4])"
