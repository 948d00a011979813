"""Shared engine search models and protocols."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from chesslet.core.enums import Color
    from chesslet.core.move import Move
    from chesslet.core.position import Position

_T = TypeVar("_T")


class Difficulty(IntEnum):
    """Engine strength presets."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def search_depth(self) -> int:
        """Minimax depth in plies (0 means no search, random play)."""
        return _SEARCH_DEPTHS[self]

    def __str__(self) -> str:
        return self.name.capitalize()


_SEARCH_DEPTHS: dict[Difficulty, int] = {
    Difficulty.EASY: 0,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}


class RandomSource(Protocol):
    """The slice of :class:`random.Random` the engine draws from."""

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[_T]) -> _T: ...


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by a move selection.

    ``score_cp`` is ``None`` when the move was picked at random (easy play or
    a medium-level blunder) rather than by search.
    """

    best_move: Move | None
    score_cp: int | None
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for move-selecting engines used by the game layer."""

    def select_move(
        self,
        position: Position,
        color: Color,
        difficulty: Difficulty,
    ) -> SearchResult: ...
