"""Square type alias and coordinate helpers.

Board layout (row-major, black at the top):
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)
"""

from __future__ import annotations

from typing import Final, TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0-7

BOARD_SIZE: Final = 8
FILES: Final = "abcdefgh"


def make_square(row: int, col: int) -> Square:
    """Create square from row (0-7, top to bottom) and column (0-7, a-h)."""
    return (row, col)


def row_of(sq: Square) -> int:
    return sq[0]


def col_of(sq: Square) -> int:
    return sq[1]


def inside_board(row: int, col: int) -> bool:
    """Whether (row, col) lies on the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (0, 0) -> 'a8', (7, 4) -> 'e1'."""
    row, col = sq
    return FILES[col] + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' -> (4, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(BOARD_SIZE - int(name[1]), FILES.index(name[0]))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
