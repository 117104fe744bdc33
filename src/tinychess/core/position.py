"""Position — complete game state (board + metadata) as an immutable value."""

from __future__ import annotations

from dataclasses import dataclass

from tinychess.core import applicator, attacks, move_generator, zobrist
from tinychess.core.enums import CastlingRights, Color, PieceType
from tinychess.core.move import Move
from tinychess.core.move_list import MoveList
from tinychess.core.piece import Piece
from tinychess.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Positions are values. Two positions are equal iff every field is
    equal, and playing a move returns a new position instead of changing
    this one.
    """

    board: tuple[Piece | None, ...]
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if len(self.board) != 64:
            raise ValueError(f"Board must have 64 squares, got {len(self.board)}")

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def start_position(cls) -> Position:
        """Standard starting position."""
        board: list[Piece | None] = [None] * 64
        for f, pt in enumerate(_BACK_RANK):
            board[make_square(f, 0)] = Piece(Color.WHITE, pt)
            board[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            board[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            board[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return cls(tuple(board))

    @classmethod
    def from_pieces(
        cls,
        pieces: dict[Square, Piece],
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> Position:
        """Build a position from a sparse square → piece mapping."""
        board: list[Piece | None] = [None] * 64
        for sq, piece in pieces.items():
            board[sq] = piece
        return cls(tuple(board), side_to_move, castling, en_passant)

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when it is missing."""
        king = Piece(color, PieceType.KING)
        for sq, piece in enumerate(self.board):
            if piece == king:
                return sq
        return None

    def is_in_check(self, color: Color | None = None) -> bool:
        """Whether *color* (default: side to move) is in check."""
        return attacks.is_in_check(
            self, self.side_to_move if color is None else color
        )

    def zobrist_hash(self) -> int:
        return zobrist.position_hash(self)

    # ── Moves ────────────────────────────────────────────────────────────

    def generate_legal_moves(self) -> MoveList:
        return move_generator.generate_legal_moves(self)

    def apply(self, move: Move) -> Position:
        """Unchecked application of a pseudo-legal move."""
        return applicator.apply_move(self, move)

    def make_move(self, move: Move) -> Position | None:
        """Play *move* if legal, else ``None``."""
        return applicator.make_move(self, move)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.board[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        rows.append(f"Side: {self.side_to_move}")
        return "\n".join(rows)
