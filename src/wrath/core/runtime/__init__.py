"""
Runtime configuration exports.

Provides game-wide constants and settings. All exports are lightweight
class constants with no initialization overhead.
"""

from wrath.core.runtime.game_settings import (
    Display,
    Fonts,
    Physics,
    Player,
    Obstacles,
    Combat,
    Background,
    Storage,
    Layers,
    Palette,
    Debug,
)
from wrath.core.runtime.input_frame import InputFrame
from wrath.core.runtime.simulation_config import SimulationConfig

__all__ = [
    # Display & Rendering
    'Display',
    'Fonts',
    'Layers',
    'Palette',
    'Background',
    # Gameplay
    'Physics',
    'Player',
    'Obstacles',
    'Combat',
    'SimulationConfig',
    'InputFrame',
    # Storage
    'Storage',
    # Debug
    'Debug',
]
