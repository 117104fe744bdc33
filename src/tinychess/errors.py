"""Exception types raised by tinychess."""

from __future__ import annotations


class TinyChessError(Exception):
    """Base class for all tinychess errors."""


class IllegalMoveError(TinyChessError, ValueError):
    """A move was submitted that is not legal in the current position."""

    def __init__(self, move: object, fen: str | None = None) -> None:
        self.move = move
        self.fen = fen
        detail = f" in {fen}" if fen else ""
        super().__init__(f"Illegal move {move}{detail}")


class ConfigError(TinyChessError, ValueError):
    """Search configuration is malformed."""
