"""
highscore_store.py
------------------
Persists the single best score between sessions as decimal text.

Anything that goes wrong while reading is treated as "no high score yet",
and a failed write never interrupts the game.
"""

import os

from wrath.core.debug.debug_logger import DebugLogger
from wrath.core.runtime.game_settings import Storage


class HighScoreStore:
    """Loads and saves the high score from a plain text file."""

    def __init__(self, path=None):
        """
        Args:
            path: Optional custom path for the high score file
        """
        self.path = path or Storage.HIGHSCORE_FILE

    def load(self) -> int:
        """Return the stored high score, or 0 if absent or unparsable."""
        if not os.path.exists(self.path):
            DebugLogger.system("No high score file, starting at 0", category="storage")
            return 0

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read().strip()
            score = int(raw)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            DebugLogger.warn(f"Unreadable high score in {self.path}: {e}", category="storage")
            return 0

        if score < 0:
            DebugLogger.warn(f"Negative high score {score} ignored", category="storage")
            return 0

        DebugLogger.system(f"Loaded high score {score}", category="storage")
        return score

    def save(self, score: int) -> bool:
        """
        Write the score as decimal text.

        Returns:
            bool: True if the write succeeded
        """
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(str(int(score)))
        except OSError as e:
            DebugLogger.warn(f"Failed to save high score: {e}", category="storage")
            return False

        DebugLogger.action(f"Saved high score {score}", category="storage")
        return True
