"""Shared engine search models: configuration, result, progress hook."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

from tinychess.errors import ConfigError

if TYPE_CHECKING:
    from tinychess.core.move import Move

ProgressHook = Callable[[], None]

MIN_DEPTH = 1
MAX_DEPTH = 8


def no_progress() -> None:
    return None


@dataclass(slots=True, frozen=True)
class SearchConfig:
    """Search constraints for a single move computation."""

    max_depth: int = 6
    node_limit: int | None = 20_000
    quiescence_depth: int | None = 8
    use_book: bool = True

    def __post_init__(self) -> None:
        if not _is_int(self.max_depth):
            raise ConfigError(f"max_depth must be an int, got {self.max_depth!r}")
        for name in ("node_limit", "quiescence_depth"):
            value = getattr(self, name)
            if value is not None and not _is_int(value):
                raise ConfigError(f"{name} must be an int or None, got {value!r}")
        if not isinstance(self.use_book, bool):
            raise ConfigError(f"use_book must be a bool, got {self.use_book!r}")

    @property
    def effective_depth(self) -> int:
        """Search depth clamped to ``[MIN_DEPTH, MAX_DEPTH]``."""
        return max(MIN_DEPTH, min(MAX_DEPTH, self.max_depth))

    @property
    def effective_node_limit(self) -> int | None:
        if self.node_limit is None:
            return None
        return max(1, self.node_limit)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> SearchConfig:
        """Build a config from plain key/value settings."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigError(f"Unknown search settings: {', '.join(unknown)}")
        return cls(**mapping)  # type: ignore[arg-type]


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``score`` is from the searching side's point of view. When the node
    budget ran out it is a heuristic value, not a fully searched one.
    """

    best_move: Move | None
    score: int
    depth: int
    nodes: int
    from_book: bool = False


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
