"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square, square_name

STARTING_PLACEMENT: Final = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_BACK_RANK: Final = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces.

    One cell per square, so two pieces can never share a square. The board
    carries no rules of its own; everything that moves pieces around lives
    in :mod:`chessrules.core.applicator`.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for occupied squares, optionally of one color."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None and (color is None or piece.color == color):
                    yield (row, col), piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, _ in self.occupied(color)]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [sq for sq, p in self.occupied(color) if p.piece_type == piece_type]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for sq, piece in self.occupied(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Independent clone; pieces are immutable so rows are copied shallowly."""
        b = Board()
        b._grid = [cells.copy() for cells in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on rows 0-1, white on rows 6-7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, pt)
            b[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_placement(cls, placement: str) -> Board:
        """Parse a FEN piece-placement field, first rank listed is row 0."""
        rows = placement.split("/")
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
        board = cls()
        for row, row_text in enumerate(rows):
            col = 0
            for ch in row_text:
                if ch.isdigit():
                    step = int(ch)
                    if not (1 <= step <= BOARD_SIZE):
                        raise ValueError(
                            f"Invalid placement digit {ch!r}: {placement!r}"
                        )
                    col += step
                else:
                    if col >= BOARD_SIZE:
                        raise ValueError(f"Invalid placement rank width: {placement!r}")
                    board[(row, col)] = Piece.from_char(ch)
                    col += 1
                if col > BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
            if col != BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        return board

    def placement(self) -> str:
        """Serialise to a FEN piece-placement field."""
        rows: list[str] = []
        for cells in self._grid:
            text = ""
            empty = 0
            for piece in cells:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
            if empty:
                text += str(empty)
            rows.append(text)
        return "/".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{square_name((row, 0))[1]} {text}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
