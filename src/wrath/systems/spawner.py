"""
spawner.py
----------
Stochastic obstacle generation.

Responsibilities
----------------
- Roll an independent spawn chance once per frame (not scaled by dt).
- Sample size, speed and horizontal position for each new square.
- Place new squares just above the top edge of the screen.

The random source is passed in on every call so that a single seeded
generator drives the whole session.
"""

from wrath.core.debug.debug_logger import DebugLogger
from wrath.entities.shape import Shape


class ObstacleSpawner:
    """Appends falling squares to an obstacle list."""

    def __init__(self, config):
        """
        Args:
            config: SimulationConfig with spawn parameters
        """
        self.config = config

    def should_spawn(self, rng) -> bool:
        """Bernoulli trial: spawn_chance in spawn_roll."""
        return rng.randint(0, self.config.spawn_roll - 1) < self.config.spawn_chance

    def create_obstacle(self, rng, screen_width: float) -> Shape:
        """Sample a new obstacle positioned one size above the screen."""
        cfg = self.config
        size = rng.uniform(cfg.square_min_size, cfg.square_max_size)
        speed = rng.uniform(cfg.min_speed, cfg.max_speed)
        x = rng.uniform(size / 2.0, screen_width - size / 2.0)
        return Shape(size=size, speed=speed, x=x, y=-size)

    def update(self, obstacles, rng, screen_width: float):
        """
        Run one frame of the spawn policy.

        Args:
            obstacles: List the new square is appended to
            rng: random.Random instance
            screen_width: Horizontal extent for placement

        Returns:
            Shape or None: the obstacle appended this frame, if any
        """
        if not self.should_spawn(rng):
            return None

        obstacle = self.create_obstacle(rng, screen_width)
        obstacles.append(obstacle)
        DebugLogger.trace(
            f"Spawned obstacle size={obstacle.size:.1f} speed={obstacle.speed:.1f} x={obstacle.x:.1f}",
            category="entity_spawn"
        )
        return obstacle
