"""Engine entry points for a UI or session layer.

Each call is synchronous and recomputes everything from the board it is
given; nothing is cached between calls.
"""

from __future__ import annotations

from chessrules.core.applicator import apply_move as _apply
from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.move import Move, MoveResult
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.rules import Rules, Verdict
from chessrules.core.types import Square


def legal_destinations(
    board: Board, origin: Square, side_to_move: Color
) -> set[Square]:
    """Legal destinations of the piece on *origin*.

    Empty if *origin* is empty, holds an opposing piece, or every candidate
    would leave the mover's king attacked.
    """
    return MoveGenerator(board).legal_destinations(origin, side_to_move)


def apply_move(board: Board, origin: Square, destination: Square) -> MoveResult:
    """Commit a move previously returned by :func:`legal_destinations`."""
    return _apply(board, Move(origin, destination))


def evaluate(board: Board, side_to_move: Color) -> Verdict:
    """Status of *board* for *side_to_move*."""
    return Rules.evaluate(board, side_to_move)
