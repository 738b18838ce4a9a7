"""High-level chess rules: check, checkmate, stalemate, king capture."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.attacks import IAttackOracle
from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus
from chessrules.core.move_generator import MoveGenerator


@dataclass(frozen=True, slots=True)
class Verdict:
    """Classification of a position for the side to move."""

    status: GameStatus
    winner: Color | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a side to move.

    Stalemate is the only draw. There is no insufficient-material,
    repetition or move-count rule.
    """

    @staticmethod
    def is_in_check(
        board: Board, side_to_move: Color, oracle: IAttackOracle | None = None
    ) -> bool:
        return MoveGenerator(board, oracle).is_in_check(side_to_move)

    @staticmethod
    def is_checkmate(
        board: Board, side_to_move: Color, oracle: IAttackOracle | None = None
    ) -> bool:
        verdict = Rules.evaluate(board, side_to_move, oracle)
        return verdict.status == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(
        board: Board, side_to_move: Color, oracle: IAttackOracle | None = None
    ) -> bool:
        verdict = Rules.evaluate(board, side_to_move, oracle)
        return verdict.status == GameStatus.STALEMATE

    @staticmethod
    def evaluate(
        board: Board, side_to_move: Color, oracle: IAttackOracle | None = None
    ) -> Verdict:
        """Classify *board* for *side_to_move*, normally right after a move.

        A missing king ends the game at once. Full legality filtering should
        make that unreachable; the branch stays as a guard for rule variants.
        """
        opponent = side_to_move.opposite
        king_sq = board.find_king(side_to_move)
        if king_sq is None:
            return Verdict(GameStatus.KING_CAPTURED, winner=opponent)

        gen = MoveGenerator(board, oracle)
        in_check = gen.is_square_attacked(king_sq, opponent)

        if not gen.has_legal_move(side_to_move):
            if in_check:
                return Verdict(GameStatus.CHECKMATE, winner=opponent)
            return Verdict(GameStatus.STALEMATE)

        if in_check:
            return Verdict(GameStatus.CHECK)
        return Verdict(GameStatus.ONGOING)
