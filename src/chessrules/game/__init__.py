"""Game management layer: session state and controller.

Quick start::

    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.new_game()
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.interfaces import GamePhase
from chessrules.game.state import GameState, MoveRecord

__all__ = [
    "GameController",
    "GameEvents",
    "GamePhase",
    "GameState",
    "MoveRecord",
]
