"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color. White always moves first."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step: white moves up the grid (toward row 0)."""
        return -1 if self is Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def value_points(self) -> int:
        """Material value credited to the capturer."""
        return _MATERIAL_VALUES[self]

    def __str__(self) -> str:
        return self.name.lower()


_MATERIAL_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


class GameStatus(Enum):
    """Verdict for the side to move after a move has been applied."""

    ONGOING = "ongoing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    KING_CAPTURED = "kingCaptured"

    @property
    def is_terminal(self) -> bool:
        return self in (
            GameStatus.CHECKMATE,
            GameStatus.STALEMATE,
            GameStatus.KING_CAPTURED,
        )
