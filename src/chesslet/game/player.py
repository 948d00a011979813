"""Human and engine-driven participants."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chesslet.core.enums import Color
from chesslet.engine.minimax_search import MinimaxEngine
from chesslet.engine.search import Difficulty, IEngine, SearchResult
from chesslet.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chesslet.core.position import Position


class HumanPlayer(IPlayer):
    """Moves arrive as board clicks, so being asked to move changes nothing."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, position: Position) -> None:
        del position


class AIPlayer(IPlayer):
    """An engine-backed side with its own strength setting.

    :meth:`request_move` only notifies the host (to start a timer or post
    the position to an ``EngineWorker``). The synchronous answer comes from
    :meth:`choose_move`, which ``GameController.play_engine_move`` calls.

    Args:
        color: Side the engine plays.
        engine: Move selector; a fresh :class:`MinimaxEngine` by default.
        difficulty: Strength used by :meth:`choose_move`.
        name: Display name. Defaults to ``"Engine (<difficulty>)"`` and then
            follows difficulty changes.
        on_request_move: ``(Position) -> None`` hook fired when the turn
            passes to this player.
    """

    __slots__ = ("_color", "_engine", "_difficulty", "_name", "_on_request_move")

    def __init__(
        self,
        color: Color,
        engine: IEngine | None = None,
        difficulty: Difficulty = Difficulty.MEDIUM,
        *,
        name: str = "",
        on_request_move: Callable[[Position], None] | None = None,
    ) -> None:
        self._color = color
        self._engine: IEngine = engine if engine is not None else MinimaxEngine()
        self._difficulty = difficulty
        self._name = name
        self._on_request_move = on_request_move

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name or f"Engine ({self._difficulty})"

    @property
    def is_human(self) -> bool:
        return False

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: Difficulty) -> None:
        self._difficulty = value

    def request_move(self, position: Position) -> None:
        if self._on_request_move is not None:
            self._on_request_move(position)

    def choose_move(self, position: Position) -> SearchResult:
        """Search *position* for this side at the current difficulty."""
        return self._engine.select_move(position, self._color, self._difficulty)
