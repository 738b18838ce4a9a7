"""GameController: validates moves and notifies listeners.

Emits events via simple callbacks so a UI or tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.core.rules import Verdict
from chessrules.core.types import Square, inside_board
from chessrules.game.interfaces import GamePhase
from chessrules.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[Verdict], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a game between two local players.

    Thread-safety: methods are designed to be called from a single thread.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    def new_game(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        self._state = GameState()
        self._state.setup(placement, side_to_move)
        _LOGGER.debug("New game, %s to move", side_to_move)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def legal_destinations(self, origin: Square) -> set[Square]:
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return set()
        if not inside_board(*origin):
            return set()
        return self._state.legal_destinations(origin)

    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False

        if not (inside_board(*move.from_sq) and inside_board(*move.to_sq)):
            _LOGGER.debug("Rejected off-board move %r", move)
            return False

        if move.to_sq not in self._state.legal_destinations(move.from_sq):
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        record = self._state.apply_move(move)
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.verdict)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, verdict: Verdict) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(verdict)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
