"""
game_state.py
-------------
Defines the top-level states the game can be in.
"""

from enum import Enum


class GameState(Enum):
    """Finite states driven by GameStateMachine."""
    MAIN_MENU = "main_menu"     # Title screen, waiting for fire
    PLAYING = "playing"         # Simulation running
    PAUSED = "paused"           # Frozen, overlay shown
    GAME_OVER = "game_over"     # Player health reached zero
