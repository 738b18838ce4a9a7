"""Pseudo-legal move geometry per piece kind.

Nothing here looks at king safety; see :mod:`chessrules.core.move_generator`
for the legality filter built on top.
"""

from __future__ import annotations

from typing import Final

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square, inside_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PAWN_START_ROW: Final = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: Final = {Color.WHITE: 0, Color.BLACK: 7}

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}
_STEPPER_OFFSETS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.KNIGHT: KNIGHT_OFFSETS,
    PieceType.KING: KING_OFFSETS,
}


def pseudo_legal_destinations(
    board: Board, origin: Square, side_to_move: Color
) -> set[Square]:
    """Destinations for the piece on *origin*, ignoring king safety.

    Empty when *origin* is empty or holds a piece that is not
    *side_to_move*'s.
    """
    piece = board[origin]
    if piece is None or piece.color != side_to_move:
        return set()

    if piece.piece_type == PieceType.PAWN:
        return _pawn_moves(board, origin, piece.color)
    if piece.piece_type in _SLIDER_DIRS:
        return _slide(board, origin, piece.color, _SLIDER_DIRS[piece.piece_type])
    return _step(board, origin, piece.color, _STEPPER_OFFSETS[piece.piece_type])


def capture_projection(board: Board, origin: Square) -> set[Square]:
    """Squares the piece on *origin* could capture onto.

    Pawns project onto both forward diagonals whether or not they are
    occupied, and never onto the square straight ahead. Rays stop at the
    first occupied square and include it whatever its color, so a defended
    piece counts as attacked.
    """
    piece = board[origin]
    if piece is None:
        return set()

    row, col = origin
    if piece.piece_type == PieceType.PAWN:
        r = row + piece.color.forward
        return {(r, c) for c in (col - 1, col + 1) if inside_board(r, c)}
    if piece.piece_type in _SLIDER_DIRS:
        return _slide(board, origin, None, _SLIDER_DIRS[piece.piece_type])
    return _step(board, origin, None, _STEPPER_OFFSETS[piece.piece_type])


# -- Piece-specific generators (private) -----------------------------------


def _pawn_moves(board: Board, origin: Square, color: Color) -> set[Square]:
    row, col = origin
    step = color.forward
    moves: set[Square] = set()

    one_step = (row + step, col)
    if inside_board(*one_step) and board.is_empty(one_step):
        moves.add(one_step)
        two_step = (row + 2 * step, col)
        if row == PAWN_START_ROW[color] and board.is_empty(two_step):
            moves.add(two_step)

    for c in (col - 1, col + 1):
        r = row + step
        if not inside_board(r, c):
            continue
        target = board[(r, c)]
        if target is not None and target.color != color:
            moves.add((r, c))
    return moves


def _slide(
    board: Board,
    origin: Square,
    color: Color | None,
    directions: tuple[tuple[int, int], ...],
) -> set[Square]:
    """Ray-cast from *origin*. ``color=None`` keeps blockers of either side."""
    row, col = origin
    moves: set[Square] = set()
    for dr, dc in directions:
        r, c = row + dr, col + dc
        while inside_board(r, c):
            target = board[(r, c)]
            if target is None:
                moves.add((r, c))
            else:
                if color is None or target.color != color:
                    moves.add((r, c))
                break
            r += dr
            c += dc
    return moves


def _step(
    board: Board,
    origin: Square,
    color: Color | None,
    offsets: tuple[tuple[int, int], ...],
) -> set[Square]:
    row, col = origin
    moves: set[Square] = set()
    for dr, dc in offsets:
        r, c = row + dr, col + dc
        if not inside_board(r, c):
            continue
        target = board[(r, c)]
        if color is None or target is None or target.color != color:
            moves.add((r, c))
    return moves
