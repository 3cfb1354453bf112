"""
Scene module exports.

Provides the game state enum and the state machine that drives it.
"""

from wrath.scenes.game_state import GameState

__all__ = [
    'GameState',
]
