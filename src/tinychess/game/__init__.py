"""Game layer: stateful session wrapper over the immutable core."""

from tinychess.game.session import GameSession, MoveChoices

__all__ = ["GameSession", "MoveChoices"]
