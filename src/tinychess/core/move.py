"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from tinychess.core.enums import PieceType
from tinychess.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    A move only has meaning relative to the position it was generated
    for; it is not validated until applied.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    is_en_passant: bool = False
    is_castling: bool = False

    @classmethod
    def quiet(cls, from_sq: Square, to_sq: Square) -> Move:
        """A move with no special flags."""
        return cls(from_sq, to_sq)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
