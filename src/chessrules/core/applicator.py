"""Move application: the only code that mutates a live board."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import PieceType
from chessrules.core.geometry import PROMOTION_ROW
from chessrules.core.move import Move, MoveResult
from chessrules.core.piece import Piece


def apply_move(board: Board, move: Move) -> MoveResult:
    """Relocate the piece on ``move.from_sq`` to ``move.to_sq``.

    Legality is not checked again; *move* must come from
    :meth:`MoveGenerator.legal_destinations`. Whatever stood on the
    destination is discarded and reported as ``captured``. A pawn reaching
    the far row always becomes a queen.
    """
    piece = board[move.from_sq]
    if piece is None:
        return MoveResult()

    target = board[move.to_sq]
    captured = target.piece_type if target is not None else None

    promoted = (
        piece.piece_type == PieceType.PAWN
        and move.to_sq[0] == PROMOTION_ROW[piece.color]
    )
    if promoted:
        piece = Piece(piece.color, PieceType.QUEEN)

    board[move.to_sq] = piece
    board[move.from_sq] = None
    return MoveResult(captured=captured, promoted=promoted)
