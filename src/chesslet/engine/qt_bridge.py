"""Qt bridge to run engine move selection in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesslet.core.enums import Color
from chesslet.core.position import Position
from chesslet.engine.minimax_search import MinimaxEngine
from chesslet.engine.search import Difficulty, IEngine

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The worker searches a private copy of the requested position, so the
    host may keep rendering its own board meanwhile. A running search cannot
    be interrupted; hosts drop stale answers by comparing ``request_id``.
    """

    best_move_ready = pyqtSignal(int, object, object)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_difficulty", "_engine")

    def __init__(
        self,
        *,
        difficulty: Difficulty = Difficulty.MEDIUM,
        engine: IEngine | None = None,
    ) -> None:
        super().__init__()
        self._engine: IEngine = engine if engine is not None else MinimaxEngine()
        self._difficulty = difficulty

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @pyqtSlot(object, object, int)
    def request_move(self, position_obj: object, color_obj: object, request_id: int) -> None:
        """Select a move for *color_obj* in *position_obj* and emit the result."""
        if not isinstance(position_obj, Position) or not isinstance(color_obj, Color):
            self.search_error.emit(request_id, "Engine received invalid request")
            return

        try:
            result = self._engine.select_move(
                position_obj.copy(),
                color_obj,
                self._difficulty,
            )
        except Exception as exc:
            _LOGGER.exception("Engine search %d failed", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, result.best_move, result.score_cp)

    @pyqtSlot(int)
    def set_difficulty(self, difficulty: int) -> None:
        """Update difficulty (takes effect on the next request)."""
        self._difficulty = Difficulty(difficulty)
