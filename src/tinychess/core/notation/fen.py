"""FEN (Forsyth-Edwards Notation) reading and writing."""

from __future__ import annotations

from tinychess.core.enums import CastlingRights, Color
from tinychess.core.piece import Piece
from tinychess.core.position import Position
from tinychess.core.types import Square, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}
_SIDE_CHARS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN record; the two clock fields may be omitted."""
    fields = fen.split()
    if len(fields) not in (4, 5, 6):
        raise ValueError(f"FEN needs 4 to 6 fields, got {len(fields)}: {fen!r}")

    board = _read_placement(fields[0])
    side = _SIDE_CHARS.get(fields[1])
    if side is None:
        raise ValueError(f"Bad side to move {fields[1]!r} in FEN {fen!r}")
    castling = _read_castling(fields[2])
    en_passant = _read_en_passant(fields[3], side)
    halfmove = _read_counter(fields, 4, default=0, minimum=0)
    fullmove = _read_counter(fields, 5, default=1, minimum=1)
    return Position(board, side, castling, en_passant, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise *pos* as a six-field FEN record."""
    side = "w" if pos.side_to_move == Color.WHITE else "b"
    castling = "".join(
        char for char, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    ep = "-" if pos.en_passant is None else square_name(pos.en_passant)
    return " ".join(
        (
            _write_placement(pos.board),
            side,
            castling or "-",
            ep,
            str(pos.halfmove_clock),
            str(pos.fullmove_number),
        )
    )


# -- Field readers ----------------------------------------------------------


def _read_placement(text: str) -> tuple[Piece | None, ...]:
    rows = text.split("/")
    if len(rows) != 8:
        raise ValueError(f"FEN placement needs 8 ranks: {text!r}")

    board: list[Piece | None] = [None] * 64
    # The first row describes rank 8.
    for rank, row in zip(range(7, -1, -1), rows):
        file = 0
        for char in row:
            if char in "12345678":
                file += int(char)
            elif file < 8:
                board[make_square(file, rank)] = Piece.from_char(char)
                file += 1
            else:
                file = 9
            if file > 8:
                break
        if file != 8:
            raise ValueError(f"FEN rank {row!r} does not span 8 files")
    return tuple(board)


def _read_castling(text: str) -> CastlingRights:
    rights = CastlingRights.NONE
    if text == "-":
        return rights
    if len(set(text)) != len(text):
        raise ValueError(f"Repeated castling flag in {text!r}")
    for char in text:
        if char not in _CASTLING_CHARS:
            raise ValueError(f"Unknown castling flag {char!r} in {text!r}")
        rights |= _CASTLING_CHARS[char]
    return rights


def _read_en_passant(text: str, side: Color) -> Square | None:
    if text == "-":
        return None
    sq = parse_square(text)
    # The target lies behind a pawn that just advanced two ranks.
    if rank_of(sq) != (5 if side == Color.WHITE else 2):
        raise ValueError(f"En-passant square {text!r} impossible for {side}")
    return sq


def _read_counter(fields: list[str], index: int, *, default: int, minimum: int) -> int:
    if len(fields) <= index:
        return default
    value = int(fields[index])
    if value < minimum:
        raise ValueError(f"FEN counter {fields[index]!r} below {minimum}")
    return value


# -- Field writers ----------------------------------------------------------


def _write_placement(board: tuple[Piece | None, ...]) -> str:
    rows: list[str] = []
    for rank in range(7, -1, -1):
        row = ""
        gap = 0
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                gap += 1
                continue
            if gap:
                row += str(gap)
                gap = 0
            row += str(piece)
        rows.append(row + (str(gap) if gap else ""))
    return "/".join(rows)
