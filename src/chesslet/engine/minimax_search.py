"""Difficulty-scaled move selection (random play + minimax/alpha-beta)."""

from __future__ import annotations

import logging
import random

from chesslet.core.enums import Color
from chesslet.core.move import Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.position import Position
from chesslet.core.types import Square
from chesslet.engine.evaluation import evaluate
from chesslet.engine.search import Difficulty, IEngine, RandomSource, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000
NO_MOVES_SCORE = 10_000

EASY_CAPTURE_RATE = 0.30
MEDIUM_BLUNDER_RATE = 0.15
# Root scores get a uniform integer in [-_JITTER, _JITTER - 1].
_JITTER = 10


class MinimaxEngine(IEngine):
    """Picks moves by difficulty: random, blundering minimax or full minimax.

    The search plays moves on the given position and takes them back again,
    so the position must not be touched by anyone else while
    :meth:`select_move` runs. It is restored exactly on return.

    Args:
        rng: Randomness for easy play, blunders and root jitter. Defaults to
            a fresh :class:`random.Random`; pass a seeded one for repeatable
            games.
        prune: Alpha-beta cutoffs. Turning them off yields the same moves and
            scores, only slower.
    """

    __slots__ = ("_rng", "_prune", "_nodes")

    def __init__(self, rng: RandomSource | None = None, *, prune: bool = True) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._prune = prune
        self._nodes = 0

    @property
    def nodes(self) -> int:
        """Minimax calls made by the last search."""
        return self._nodes

    def select_move(
        self,
        position: Position,
        color: Color,
        difficulty: Difficulty,
    ) -> SearchResult:
        self._nodes = 0
        moves = MoveGenerator(position.board).generate_legal_moves(color)
        if not moves:
            return SearchResult(None, None, 0, 0)

        if difficulty == Difficulty.EASY:
            result = SearchResult(self._random_move(position, moves), None, 0, 0)
        elif difficulty == Difficulty.MEDIUM and self._rng.random() < MEDIUM_BLUNDER_RATE:
            result = SearchResult(self._random_move(position, moves), None, 0, 0)
        else:
            depth = difficulty.search_depth
            score, move = self._search_root(position, moves, color, depth)
            result = SearchResult(move, score, depth, self._nodes)

        _LOGGER.debug(
            "%s %s picked %s (score=%s depth=%d nodes=%d)",
            difficulty,
            color,
            result.best_move,
            result.score_cp,
            result.depth,
            result.nodes,
        )
        return result

    def hint(self, position: Position, color: Color) -> Square | None:
        """Origin square of a medium-strength suggestion for *color*."""
        result = self.select_move(position, color, Difficulty.MEDIUM)
        if result.best_move is None:
            return None
        return result.best_move.from_sq

    def minimax(
        self,
        position: Position,
        depth: int,
        maximizing: bool,
        alpha: int,
        beta: int,
        *,
        max_color: Color,
    ) -> int:
        """Minimax value of *position* from *max_color*'s point of view.

        *max_color* moves at maximizing nodes, its opponent at minimizing
        ones. A side left without moves scores ``∓NO_MOVES_SCORE``.
        """
        self._nodes += 1
        board = position.board
        if depth == 0:
            return evaluate(board, max_color)

        side = max_color if maximizing else max_color.opposite
        moves = MoveGenerator(board).generate_legal_moves(side)
        if not moves:
            return -NO_MOVES_SCORE if maximizing else NO_MOVES_SCORE

        if maximizing:
            best = -_INF_SCORE
            for move in moves:
                position.make_move(move)
                score = self.minimax(
                    position, depth - 1, False, alpha, beta, max_color=max_color
                )
                position.unmake_move()

                best = max(best, score)
                alpha = max(alpha, score)
                if self._prune and beta <= alpha:
                    break
            return best

        best = _INF_SCORE
        for move in moves:
            position.make_move(move)
            score = self.minimax(
                position, depth - 1, True, alpha, beta, max_color=max_color
            )
            position.unmake_move()

            best = min(best, score)
            beta = min(beta, score)
            if self._prune and beta <= alpha:
                break
        return best

    # ── Internal helpers ─────────────────────────────────────────────────

    def _random_move(self, position: Position, moves: list[Move]) -> Move:
        captures = MoveGenerator(position.board).capture_moves(moves)
        if captures and self._rng.random() < EASY_CAPTURE_RATE:
            return self._rng.choice(captures)
        return self._rng.choice(moves)

    def _search_root(
        self,
        position: Position,
        root_moves: list[Move],
        color: Color,
        depth: int,
    ) -> tuple[int, Move]:
        if depth <= 0:
            raise ValueError("Search depth must be >= 1")

        best_score = -_INF_SCORE
        best_move = root_moves[0]
        opponent = color.opposite

        for move in root_moves:
            position.make_move(move)
            # Child values are from the opponent's side, hence the negation.
            score = -self.minimax(
                position,
                depth - 1,
                True,
                -_INF_SCORE,
                _INF_SCORE,
                max_color=opponent,
            )
            position.unmake_move()

            score += self._rng.randint(-_JITTER, _JITTER - 1)
            if score > best_score:
                best_score = score
                best_move = move

        return best_score, best_move
