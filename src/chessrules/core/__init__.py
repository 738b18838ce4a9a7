"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, MoveGenerator, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.legal_destinations(parse_square("e2"), Color.WHITE))
"""

from chessrules.core.applicator import apply_move
from chessrules.core.attacks import IAttackOracle, ScanningAttackOracle
from chessrules.core.board import STARTING_PLACEMENT, Board
from chessrules.core.enums import Color, GameStatus, PieceType
from chessrules.core.geometry import capture_projection, pseudo_legal_destinations
from chessrules.core.move import Move, MoveResult
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules, Verdict
from chessrules.core.types import (
    Square,
    col_of,
    inside_board,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "inside_board",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveResult",
    "Piece",
    "STARTING_PLACEMENT",
    # Rules engine
    "IAttackOracle",
    "MoveGenerator",
    "Rules",
    "ScanningAttackOracle",
    "Verdict",
    "apply_move",
    "capture_projection",
    "pseudo_legal_destinations",
]
