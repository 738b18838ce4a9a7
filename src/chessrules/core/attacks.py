"""Attack detection: is a square capturable by a given side?"""

from __future__ import annotations

from abc import ABC, abstractmethod

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.geometry import capture_projection
from chessrules.core.types import Square


class IAttackOracle(ABC):
    """Interface for attack queries.

    The legality filter and the terminal-state evaluator only depend on this
    ABC, so a cached or incremental implementation can replace
    :class:`ScanningAttackOracle` without touching them.
    """

    @abstractmethod
    def is_square_attacked(self, board: Board, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color* on *board*?"""

    def is_in_check(self, board: Board, color: Color) -> bool:
        """Is *color*'s king attacked? A missing king is never in check."""
        king_sq = board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(board, king_sq, color.opposite)


class ScanningAttackOracle(IAttackOracle):
    """Scans every piece of the attacking side on each call. No caching."""

    __slots__ = ()

    def is_square_attacked(self, board: Board, sq: Square, by_color: Color) -> bool:
        for origin, _ in board.occupied(by_color):
            if sq in capture_projection(board, origin):
                return True
        return False


DEFAULT_ORACLE: IAttackOracle = ScanningAttackOracle()
