"""Shared definitions for the game layer."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()
