"""
combat.py
---------
Damage, healing and score rules, plus fire control.

Responsibilities
----------------
- Compute health and score deltas from the size of the square involved.
- Keep health inside [0, circle_size] and score non-negative.
- Gate firing on a fresh trigger and a health-scaled cooldown.
"""

import math

from wrath.core.debug.debug_logger import DebugLogger
from wrath.entities.shape import Shape


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero (non-negative inputs)."""
    return int(math.floor(value + 0.5))


# ===========================================================
# Collision Outcomes
# ===========================================================

def contact_damage(config, obstacle_size: float) -> float:
    """Health lost when a square of this size hits the player. Not rounded."""
    return config.base_damage * obstacle_size / config.size_unit


def contact_penalty(config, obstacle_size: float) -> int:
    """Score lost when a square of this size hits the player."""
    return round_half_up(config.base_score * obstacle_size / config.size_unit)


def kill_reward(config, obstacle_size: float) -> int:
    """Score gained for shooting a square. Smaller squares pay more."""
    return round_half_up(config.base_score * config.square_max_size / obstacle_size)


def kill_heal(config, obstacle_size: float) -> float:
    """Health regained for shooting a square, before capping."""
    return config.square_max_size / obstacle_size


def apply_damage(player, config, obstacle_size: float) -> float:
    """
    Shrink the player by the contact damage, floored at 0.

    Returns:
        float: Damage actually applied
    """
    before = player.size
    player.size = max(0.0, player.size - contact_damage(config, obstacle_size))
    return before - player.size


def apply_heal(player, config, obstacle_size: float):
    """Grow the player, capped at full health."""
    player.size = min(player.size + kill_heal(config, obstacle_size), config.circle_size)


def subtract_score(score: int, amount: int) -> int:
    """Saturating subtraction: score never drops below 0."""
    return max(0, score - amount)


# ===========================================================
# Fire Control
# ===========================================================

def fire_rate_multiplier(config, player_size: float) -> float:
    """Smaller (more damaged) players fire faster, up to the configured cap."""
    if player_size <= 0:
        return config.max_fire_rate_multiplier
    return min(config.circle_size / player_size, config.max_fire_rate_multiplier)


class FireControl:
    """Decides whether a fire action turns into a bullet."""

    def __init__(self, config):
        self.config = config

    def cooldown(self, player_size: float) -> float:
        """Seconds that must pass between accepted shots."""
        return self.config.fire_rate / fire_rate_multiplier(self.config, player_size)

    def can_fire(self, state, now: float) -> bool:
        return now - state.last_shot_time > self.cooldown(state.player.size)

    def try_fire(self, state, fire_pressed: bool, now: float):
        """
        Spawn a bullet at the player if the trigger is fresh and off cooldown.

        Args:
            state: SimulationState (bullets and last_shot_time are mutated)
            fire_pressed: True only on the frame the fire key went down
            now: Current simulation time in seconds

        Returns:
            Shape or None: the new bullet, if one was fired
        """
        if not fire_pressed:
            return None

        if not self.can_fire(state, now):
            DebugLogger.trace("Shot rejected (cooldown)", category="combat")
            return None

        player = state.player
        bullet = Shape(
            size=self.config.bullet_size,
            speed=self.config.bullet_speed,
            x=player.x,
            y=player.y,
        )
        state.bullets.append(bullet)
        state.last_shot_time = now
        DebugLogger.trace(f"Fired bullet at ({player.x:.1f}, {player.y:.1f})", category="combat")
        return bullet
