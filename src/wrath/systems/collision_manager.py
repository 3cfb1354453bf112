"""
collision_manager.py
--------------------
Collision resolution between the player, falling squares and bullets.

Responsibilities
----------------
- Detect axis-aligned overlaps between shapes.
- Apply contact damage and score penalties when squares hit the player.
- Mark squares hit by bullets, heal the player and award score.
- Filter out consumed, collided and off-screen entities.

Resolution runs in two passes and the order matters:
    1. squares vs player (also the retention filter for squares)
    2. bullets vs remaining squares
A square marked by a bullet in pass 2 stays in the list until the next
frame's pass 1 filters it out.
"""

from dataclasses import dataclass

from wrath.core.debug.debug_logger import DebugLogger
from wrath.entities.shape import Shape
from wrath.systems import combat


@dataclass
class CollisionReport:
    """Summary of one frame of collision resolution."""
    player_hits: int = 0
    damage_taken: float = 0.0
    obstacles_destroyed: int = 0
    score_delta: int = 0
    died: bool = False
    score_at_death: int = 0


class CollisionManager:
    """Resolves collisions on a SimulationState in place."""

    def __init__(self, config):
        self.config = config

    # ===========================================================
    # Frame Resolution
    # ===========================================================
    def resolve(self, state) -> CollisionReport:
        """Run both collision passes on the state."""
        report = CollisionReport()
        self._resolve_player_hits(state, report)
        self._resolve_bullet_hits(state, report)
        return report

    def _resolve_player_hits(self, state, report):
        """
        Pass 1: squares vs player, then keep only live on-screen squares.

        Every square is tested against the player's hitbox as it was when the
        pass started, so damage taken earlier in the pass does not let later
        squares slip through.
        """
        player = state.player
        hitbox = Shape(size=player.size, speed=0.0, x=player.x, y=player.y)
        kept = []

        for obstacle in state.obstacles:
            if not obstacle.collided and obstacle.collides_with(hitbox):
                self._apply_contact(state, obstacle, report)
                continue

            if obstacle.y < state.screen_height + obstacle.size and not obstacle.collided:
                kept.append(obstacle)

        state.obstacles = kept

        if report.player_hits:
            DebugLogger.trace(
                f"Player hit {report.player_hits}x, size={player.size:.2f}, score={state.score}",
                category="collision"
            )

    def _apply_contact(self, state, obstacle, report):
        cfg = self.config
        score_before = state.score

        report.damage_taken += combat.apply_damage(state.player, cfg, obstacle.size)
        state.score = combat.subtract_score(state.score, combat.contact_penalty(cfg, obstacle.size))
        report.score_delta += state.score - score_before
        report.player_hits += 1

        if state.player.size <= 0 and not report.died:
            # The high score is judged on the score at the moment of death
            report.died = True
            report.score_at_death = state.score

    def _resolve_bullet_hits(self, state, report):
        """Pass 2: each bullet is consumed by the first square it overlaps."""
        cfg = self.config
        kept = []

        for bullet in state.bullets:
            target = None
            for obstacle in state.obstacles:
                if not obstacle.collided and bullet.collides_with(obstacle):
                    target = obstacle
                    break

            if target is not None:
                target.mark_collided()
                bullet.mark_collided()
                combat.apply_heal(state.player, cfg, target.size)
                reward = combat.kill_reward(cfg, target.size)
                state.score += reward
                report.score_delta += reward
                report.obstacles_destroyed += 1
                continue

            if bullet.y > -bullet.size / 2.0:
                kept.append(bullet)

        state.bullets = kept

        if report.obstacles_destroyed:
            DebugLogger.trace(
                f"Destroyed {report.obstacles_destroyed} obstacle(s), score={state.score}",
                category="collision"
            )
