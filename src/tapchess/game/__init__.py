"""Game management layer — state and the click-driven controller.

Quick start::

    from tapchess.core import parse_square
    from tapchess.game import GameController

    ctrl = GameController()
    ctrl.click(parse_square("e7"))
    ctrl.click(parse_square("e5"))
"""

from tapchess.game.controller import GameController, GameEvents
from tapchess.game.interfaces import IBoardReader, IGameController, InteractionPhase
from tapchess.game.state import GameState

__all__ = [
    # Interfaces
    "IBoardReader",
    "IGameController",
    "InteractionPhase",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
