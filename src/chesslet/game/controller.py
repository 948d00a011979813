"""GameController: the central orchestrator of a game session.

Coordinates: Players, GameState, MoveGenerator and the engine.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslet.core.board import Board
from chesslet.core.enums import Color, GameResult
from chesslet.core.move import Move, MoveOutcome
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.types import Square, square_name
from chesslet.engine.minimax_search import MinimaxEngine
from chesslet.engine.search import Difficulty, IEngine
from chesslet.game.interfaces import GamePhase, IGameController, IPlayer
from chesslet.game.player import AIPlayer, HumanPlayer
from chesslet.game.state import GameState
from chesslet.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
SelectionCallback = Callable[[Square | None, list[Square]], None]  # square, targets


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a game: selection, validation, turns, engine replies.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). While the engine searches, the position belongs to
    the search; no human move is accepted until the engine has answered.
    """

    __slots__ = ("_state", "_players", "_settings", "_engine", "events")

    def __init__(
        self,
        settings: GameSettings | None = None,
        engine: IEngine | None = None,
    ) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._engine: IEngine = engine if engine is not None else MinimaxEngine()
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Start a session; missing players are built from the settings."""
        self._players = {
            Color.WHITE: white or self._default_player(Color.WHITE),
            Color.BLACK: black or self._default_player(Color.BLACK),
        }
        self._state = GameState()
        self._state.setup(board, side_to_move)
        _LOGGER.info(
            "New game: %s vs %s (%s, %s)",
            self._players[Color.WHITE].name,
            self._players[Color.BLACK].name,
            self._settings.mode_label,
            self._settings.difficulty,
        )
        self._prompt_current_player()

    def click_square(self, sq: Square) -> bool:
        """Feed a board click into the selection state machine.

        Returns True when the click completed a move.
        """
        state = self._state
        if state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.PIECE_SELECTED):
            return False
        cp = self.current_player
        if cp is not None and not cp.is_human:
            return False

        piece = state.board[sq]
        own_piece = piece is not None and piece.color == state.side_to_move

        if state.selected is None:
            if own_piece:
                self._select(sq)
            return False

        if state.selected == sq:
            self._deselect()
            return False

        if own_piece:
            self._select(sq)
            return False

        move = Move(state.selected, sq)
        self._deselect()
        return self.submit_move(move)

    def submit_move(self, move: Move) -> bool:
        """Play a human move. Rejected while the engine side is on turn."""
        if self._state.phase == GamePhase.THINKING:
            return False
        cp = self.current_player
        if cp is not None and not cp.is_human:
            return False
        return self._apply(move)

    def play_engine_move(self) -> bool:
        """Let the engine move for the AI side on turn (synchronous)."""
        state = self._state
        cp = self.current_player
        if state.phase != GamePhase.THINKING or not isinstance(cp, AIPlayer):
            return False

        result = cp.choose_move(state.position)
        if result.best_move is None:
            state.declare_no_moves()
            _LOGGER.info("Game over: %s has no moves", cp.color)
            self._emit_game_over(state.result)
            return False

        if not self._apply(result.best_move):
            _LOGGER.warning("Engine produced a rejected move: %s", result.best_move)
            return False
        return True

    def _apply(self, move: Move) -> bool:
        state = self._state
        if state.is_game_over:
            return False
        if state.phase == GamePhase.NOT_STARTED:
            return False

        piece = state.board[move.from_sq]
        if piece is None or piece.color != state.side_to_move:
            return False
        if not MoveGenerator(state.board).is_legal_move(move.from_sq, move.to_sq):
            return False

        outcome = state.apply_move(move)
        _LOGGER.debug("%s played %s", piece.color, move)
        self._emit_move(outcome)

        if state.is_game_over:
            _LOGGER.info("Game over: %s", state.result.name)
            self._emit_game_over(state.result)
            return True

        self._prompt_current_player()
        return True

    def undo_move(self) -> bool:
        """Undo one ply, or the last human/engine pair when playing the AI."""
        state = self._state
        if state.phase in (GamePhase.NOT_STARTED, GamePhase.THINKING):
            return False
        if not state.move_history:
            return False

        count = 2 if self._settings.play_vs_ai and state.ply_count >= 2 else 1
        if not state.undo(count):
            return False
        _LOGGER.debug("Undid %d ply", count)

        self._emit_selection()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    def hint(self) -> Square | None:
        """Select and return the origin of a medium-strength suggestion."""
        state = self._state
        if state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.PIECE_SELECTED):
            return None

        result = self._engine.select_move(
            state.position, state.side_to_move, Difficulty.MEDIUM
        )
        if result.best_move is None:
            return None
        sq = result.best_move.from_sq
        _LOGGER.debug("Hint for %s: %s", state.side_to_move, square_name(sq))
        self._select(sq)
        return sq

    # ── Settings ─────────────────────────────────────────────────────────

    def set_difficulty(self, difficulty: Difficulty) -> None:
        """Change engine strength (applies from the next engine move)."""
        self._settings.difficulty = difficulty
        for p in self._players.values():
            if isinstance(p, AIPlayer):
                p.difficulty = difficulty

    def toggle_ai(self) -> None:
        """Switch between vs-AI and two-player mode and restart."""
        self._settings.play_vs_ai = not self._settings.play_vs_ai
        self.new_game()

    def legal_targets(self, sq: Square) -> list[Square]:
        return MoveGenerator(self._state.board).legal_targets(sq)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _default_player(self, color: Color) -> IPlayer:
        s = self._settings
        if s.play_vs_ai and color == s.ai_color:
            return AIPlayer(color, self._engine, s.difficulty)
        return HumanPlayer(color)

    def _select(self, sq: Square) -> None:
        self._state.selected = sq
        self._state.phase = GamePhase.PIECE_SELECTED
        self._emit_selection()
        self._emit_phase(GamePhase.PIECE_SELECTED)

    def _deselect(self) -> None:
        self._state.selected = None
        self._state.phase = GamePhase.AWAITING_MOVE
        self._emit_selection()
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.position)

    def _emit_move(self, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(outcome, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_selection(self) -> None:
        sq = self._state.selected
        targets = self.legal_targets(sq) if sq is not None else []
        for cb in self.events.on_selection_changed:
            cb(sq, targets)
