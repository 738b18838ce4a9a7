"""Legal move generation: pseudo-legal geometry filtered by king safety."""

from __future__ import annotations

from chessrules.core.attacks import DEFAULT_ORACLE, IAttackOracle
from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.geometry import pseudo_legal_destinations
from chessrules.core.move import Move
from chessrules.core.types import Square


class MoveGenerator:
    """Generates legal moves on a :class:`Board`.

    Candidate moves are simulated on a fresh :meth:`Board.copy` each, so the
    board handed in is never touched and no two candidates share scratch
    state.
    """

    __slots__ = ("_board", "_oracle")

    def __init__(self, board: Board, oracle: IAttackOracle | None = None) -> None:
        self._board = board
        self._oracle = oracle if oracle is not None else DEFAULT_ORACLE

    @property
    def oracle(self) -> IAttackOracle:
        return self._oracle

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, origin: Square, side_to_move: Color) -> set[Square]:
        """Destinations from *origin* that do not leave the mover's king attacked."""
        return {
            to_sq
            for to_sq in pseudo_legal_destinations(self._board, origin, side_to_move)
            if not self.leaves_king_attacked(Move(origin, to_sq))
        }

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All legal moves for *color*."""
        moves: list[Move] = []
        for origin in self._board.all_pieces(color):
            for to_sq in self.legal_destinations(origin, color):
                moves.append(Move(origin, to_sq))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        """Whether any piece of *color* has at least one legal move."""
        return any(
            self.legal_destinations(origin, color)
            for origin in self._board.all_pieces(color)
        )

    def leaves_king_attacked(self, move: Move) -> bool:
        """Would playing *move* leave the mover's own king attacked?

        The move is replayed on a scratch copy: piece relocated, origin
        cleared, destination overwritten. If the mover has no king on the
        scratch board the answer is ``False``.
        """
        piece = self._board[move.from_sq]
        if piece is None:
            return False

        scratch = self._board.copy()
        scratch[move.to_sq] = piece
        scratch[move.from_sq] = None

        king_sq = scratch.find_king(piece.color)
        if king_sq is None:
            return False
        return self._oracle.is_square_attacked(scratch, king_sq, piece.color.opposite)

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return self._oracle.is_in_check(self._board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return self._oracle.is_square_attacked(self._board, sq, by_color)
