"""
shape.py
--------
Entity model shared by the player circle, bullets and falling squares.

Every shape collides as an axis-aligned square centred on (x, y) with
side ``size``. For the player the size is also its health.
"""

from dataclasses import dataclass


@dataclass
class Shape:
    """Position, size, speed and hit flag of a single entity."""
    size: float
    speed: float
    x: float
    y: float
    collided: bool = False

    # ===========================================================
    # Geometry
    # ===========================================================

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def half_size(self) -> float:
        return self.size / 2.0

    def bounds(self):
        """Return (left, top, right, bottom) of the collision square."""
        half = self.half_size
        return (self.x - half, self.y - half, self.x + half, self.y + half)

    def collides_with(self, other: "Shape") -> bool:
        """
        Strict AABB overlap test.

        Squares that only touch along an edge do not collide.
        """
        if self.size <= 0 or other.size <= 0:
            return False
        left, top, right, bottom = self.bounds()
        o_left, o_top, o_right, o_bottom = other.bounds()
        return (
            left < o_right and o_left < right
            and top < o_bottom and o_top < bottom
        )

    # ===========================================================
    # State
    # ===========================================================

    def mark_collided(self):
        """Flag the shape as consumed. The flag is never cleared."""
        self.collided = True
