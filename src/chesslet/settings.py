"""User-configurable game settings."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.enums import Color
from chesslet.engine.search import Difficulty


@dataclass
class GameSettings:
    """All user-configurable settings for a game session."""

    difficulty: Difficulty = Difficulty.MEDIUM
    play_vs_ai: bool = True
    ai_color: Color = Color.BLACK

    @property
    def mode_label(self) -> str:
        return "vs AI" if self.play_vs_ai else "2 Players"
