"""
Service exports.

Thin I/O adapters used by the game loop: configuration, persistence, input.
"""

from wrath.core.services.config_manager import load_config
from wrath.core.services.highscore_store import HighScoreStore

__all__ = [
    'load_config',
    'HighScoreStore',
]
