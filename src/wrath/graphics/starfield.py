"""
starfield.py
------------
Decorative scrolling star background.

Stars drift down over time and shift sideways with the simulation's
direction modifier. Purely visual; nothing here feeds back into gameplay.
"""

import random

import pygame

from wrath.core.runtime.game_settings import Background, Layers, Palette


class Starfield:
    """Fixed star layout with wrapping scroll offsets."""

    def __init__(self, width, height, count=Background.STAR_COUNT, seed=Background.STAR_SEED):
        self.width = width
        self.height = height
        rng = random.Random(seed)
        self.stars = [
            (rng.uniform(0, width), rng.uniform(0, height), rng.choice((1, 1, 2, 3)))
            for _ in range(count)
        ]

    def star_positions(self, clock, direction_modifier):
        """Yield (x, y, size) for every star at the given time and modifier."""
        offset_x = direction_modifier * self.width
        offset_y = clock * Background.DRIFT_SPEED
        for x, y, size in self.stars:
            yield ((x - offset_x * size) % self.width, (y + offset_y * size) % self.height, size)

    def draw(self, draw_manager, clock, direction_modifier):
        for x, y, size in self.star_positions(clock, direction_modifier):
            rect = pygame.Rect(0, 0, size, size)
            rect.center = (int(x), int(y))
            draw_manager.queue_shape("rect", rect, Palette.TEXT, layer=Layers.BACKGROUND)
