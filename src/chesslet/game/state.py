"""Game state: side to move, phase, result, selection and captures."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesslet.core.board import Board
from chesslet.core.enums import Color, GameResult
from chesslet.core.move import Move, MoveOutcome
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.rules import Rules
from chesslet.core.types import Square
from chesslet.game.interfaces import GamePhase


@dataclass
class GameState:
    """Manages one session's lifecycle: position, turn, phase, result.

    Pure data and logic; no threading or UI.
    """

    position: Position = field(init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    selected: Square | None = field(default=None, init=False)
    move_history: list[MoveOutcome] = field(default_factory=list, init=False)
    # Pieces taken *by* each color, in capture order.
    captured: dict[Color, list[Piece]] = field(default_factory=dict, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game."""
        self.position = Position(board)
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.selected = None
        self.move_history.clear()
        self.captured = {Color.WHITE: [], Color.BLACK: []}

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveOutcome:
        """Apply a validated move, pass the turn and update the result.

        Caller is responsible for the legality check.
        """
        mover = self.side_to_move
        outcome = self.position.make_move(move)
        self.move_history.append(outcome)
        if outcome.captured_piece is not None:
            self.captured[mover].append(outcome.captured_piece)

        self.side_to_move = mover.opposite
        self.selected = None
        self.result = Rules.result_after(outcome, self.position.board, self.side_to_move)
        if self.result != GameResult.IN_PROGRESS:
            self.phase = GamePhase.GAME_OVER
        return outcome

    def undo(self, count: int = 1) -> bool:
        """Take back up to *count* plies. False if there is nothing to undo."""
        plies = min(count, len(self.move_history))
        if not self.position.undo(plies):
            return False

        for _ in range(plies):
            outcome = self.move_history.pop()
            self.side_to_move = self.side_to_move.opposite
            if outcome.captured_piece is not None:
                self.captured[self.side_to_move].pop()

        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE
        self.selected = None
        return True

    def declare_no_moves(self) -> None:
        """The side to move is stuck; with no check rules this is a draw."""
        self.result = GameResult.DRAW
        self.phase = GamePhase.GAME_OVER
        self.selected = None

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def ply_count(self) -> int:
        return len(self.move_history)

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1].move if self.move_history else None

    def captured_symbols(self, color: Color) -> str:
        """Unicode symbols of the pieces *color* has captured."""
        return "".join(p.symbol for p in self.captured[color])
