"""Move value object and the outcome of applying one."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Origin and destination only.

    Capture and promotion are implicit: they follow from the board at the
    moment the move is applied.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Side-channel facts reported by the applicator for scoring and display."""

    captured: PieceType | None = None
    promoted: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None
