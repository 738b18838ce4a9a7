"""Game state: owns the live board, side to move, scores and verdict."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.applicator import apply_move
from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules, Verdict
from chessrules.core.types import Square
from chessrules.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    verdict: Verdict
    captured: Piece | None = None
    promoted: bool = False

    @property
    def was_check(self) -> bool:
        return self.verdict.status in (GameStatus.CHECK, GameStatus.CHECKMATE)

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Manages one game: board, side to move, material scores, verdict.

    This is a pure data/logic class with no threading and no UI. The board is
    created in :meth:`setup` and afterwards only changed by
    :meth:`apply_move`.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    verdict: Verdict = field(default=Verdict(GameStatus.ONGOING), init=False)
    scores: dict[Color, int] = field(
        default_factory=lambda: {Color.WHITE: 0, Color.BLACK: 0}, init=False
    )
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game, optionally from a placement diagram."""
        self.board = (
            Board.from_placement(placement) if placement else Board.initial()
        )
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.verdict = Verdict(GameStatus.ONGOING)
        self.scores = {Color.WHITE: 0, Color.BLACK: 0}
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        mover = self.side_to_move
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on origin square of {move}")
        captured = self.board[move.to_sq]

        result = apply_move(self.board, move)
        if captured is not None:
            self.scores[mover] += captured.value

        self.verdict = Rules.evaluate(self.board, mover.opposite)
        if not self.verdict.is_terminal:
            self.side_to_move = mover.opposite

        record = MoveRecord(
            move=move,
            piece=piece,
            verdict=self.verdict,
            captured=captured,
            promoted=result.promoted,
        )
        self.move_history.append(record)
        _LOGGER.debug("%s played %s -> %s", mover, move, self.verdict.status.value)

        if self.verdict.is_terminal:
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info(
                "Game over: %s (winner: %s)",
                self.verdict.status.value,
                self.verdict.winner,
            )
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def material_balance(self) -> int:
        """White's captured material minus black's."""
        return self.scores[Color.WHITE] - self.scores[Color.BLACK]

    def legal_destinations(self, origin: Square) -> set[Square]:
        """Legal destinations for the side to move's piece on *origin*."""
        if self.is_game_over:
            return set()
        return MoveGenerator(self.board).legal_destinations(origin, self.side_to_move)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.board).generate_legal_moves(self.side_to_move)
