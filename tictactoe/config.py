"""
Game configuration for Modern Tic Tac Toe.
All the tunable values for turn order, the computer opponent and display.
"""

from typing import Optional

import numpy as np

from .game_state import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Override attributes on an instance (or subclass) to change them.
    """

    # ==================== TURN ORDER ====================
    # O moves first in every round, whatever the mode.
    FIRST_TO_MOVE = Mark.SECOND

    # ==================== COMPUTER OPPONENT ====================
    # Thinking delay before the computer places its mark (milliseconds).
    # Actual delay = MIN + uniform(0, JITTER)
    AI_DELAY_MIN_MS = 380
    AI_DELAY_JITTER_MS = 260

    # Seed for the opponent's random tie-breaks (None = fresh entropy)
    AI_SEED: Optional[int] = None

    # ==================== DISPLAY ====================
    MARK_LABELS = {
        Mark.FIRST: "X",
        Mark.SECOND: "O",
    }

    WIN_MESSAGE = "Congratulations! Winner: {label}"
    DRAW_MESSAGE = "It's a Draw!"

    def thinking_delay(self, rng: np.random.Generator) -> float:
        """
        Pick the computer's thinking delay.

        Args:
            rng: Random source for the jitter.

        Returns:
            Delay in seconds.
        """
        jitter = rng.random() * self.AI_DELAY_JITTER_MS
        return (self.AI_DELAY_MIN_MS + jitter) / 1000.0

    def label(self, mark: Optional[Mark]) -> str:
        """Display label for a mark ("" for an empty cell)."""
        if mark is None:
            return ""
        return self.MARK_LABELS[mark]

    def make_rng(self) -> np.random.Generator:
        """Create the random source used by the computer opponent."""
        return np.random.default_rng(self.AI_SEED)
