"""
simulation.py
-------------
The single owned record holding all mutable game state.

Score, high score, entity collections, the RNG handle and the current
GameState live here and are passed explicitly to every system.
"""

import random
import time
from dataclasses import dataclass, field

from wrath.core.runtime.simulation_config import SimulationConfig
from wrath.entities.shape import Shape
from wrath.scenes.game_state import GameState


def create_player(config) -> Shape:
    """Full-health player centred on the screen."""
    return Shape(
        size=config.circle_size,
        speed=config.movement_speed,
        x=config.screen_width / 2.0,
        y=config.screen_height / 2.0,
    )


@dataclass
class SimulationState:
    """Everything a frame reads and mutates."""
    config: SimulationConfig
    rng: random.Random
    player: Shape
    obstacles: list = field(default_factory=list)
    bullets: list = field(default_factory=list)
    score: int = 0
    high_score: int = 0
    new_high_score: bool = False
    state: GameState = GameState.MAIN_MENU
    last_shot_time: float = 0.0
    clock: float = 0.0
    direction_modifier: float = 0.0

    @property
    def screen_width(self) -> float:
        return self.config.screen_width

    @property
    def screen_height(self) -> float:
        return self.config.screen_height

    def reset(self):
        """
        Start a fresh session.

        The player is reset in place, never replaced. The high score and RNG
        carry over.
        """
        self.obstacles.clear()
        self.bullets.clear()

        self.player.size = self.config.circle_size
        self.player.x = self.screen_width / 2.0
        self.player.y = self.screen_height / 2.0
        self.player.collided = False

        self.score = 0
        self.new_high_score = False
        self.last_shot_time = self.clock


def new_simulation(config=None, high_score=0, seed=None) -> SimulationState:
    """
    Build the state for a new process.

    Args:
        config: SimulationConfig (defaults used when None)
        high_score: Value loaded from the persistence adapter
        seed: RNG seed; wall-clock time when None
    """
    config = config or SimulationConfig()
    if seed is None:
        seed = time.time()
    return SimulationState(
        config=config,
        rng=random.Random(seed),
        player=create_player(config),
        high_score=high_score,
    )
