"""Game management layer: controller, players, state machine.

Quick start::

    from chesslet.core.types import E2, E4
    from chesslet.game import GameController
    from chesslet.settings import GameSettings

    ctrl = GameController(GameSettings(play_vs_ai=True))
    ctrl.new_game()
    ctrl.click_square(E2)
    ctrl.click_square(E4)
    ctrl.play_engine_move()
"""

from chesslet.game.controller import GameController, GameEvents
from chesslet.game.interfaces import GamePhase, IGameController, IPlayer
from chesslet.game.player import AIPlayer, HumanPlayer
from chesslet.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
]
