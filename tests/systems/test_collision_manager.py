"""
test_collision_manager.py
-------------------------
Unit tests for two-pass collision resolution.

Covers:
- Contact damage, score penalty and removal of squares hitting the player
- Retention of on-screen squares and removal of off-screen/collided ones
- Bullet hits: marking, healing, reward and bullet removal
- Pass ordering and invariants on health and score
"""

import random

import pytest

from wrath.entities.shape import Shape
from wrath.systems.collision_manager import CollisionManager


@pytest.fixture
def manager(config):
    return CollisionManager(config)


def obstacle_at(x, y, size=32.0, collided=False):
    return Shape(size=size, speed=100.0, x=x, y=y, collided=collided)


def bullet_at(x, y):
    return Shape(size=4.0, speed=400.0, x=x, y=y)


# ===========================================================
# Pass 1: Squares vs Player
# ===========================================================

def test_full_health_player_hit_by_size_32(manager, playing_sim):
    sim = playing_sim
    sim.score = 50
    sim.obstacles.append(obstacle_at(sim.player.x, sim.player.y, size=32))

    report = manager.resolve(sim)

    assert sim.player.size == pytest.approx(28.0)
    assert sim.score == 30
    assert sim.obstacles == []
    assert report.player_hits == 1
    assert report.damage_taken == pytest.approx(4.0)
    assert report.died is False


def test_contact_penalty_floors_score_at_zero(manager, playing_sim):
    sim = playing_sim
    sim.score = 5
    sim.obstacles.append(obstacle_at(sim.player.x, sim.player.y, size=32))

    manager.resolve(sim)

    assert sim.score == 0


def test_damage_floors_health_at_zero_and_reports_death(manager, playing_sim):
    sim = playing_sim
    sim.player.size = 2.0
    sim.obstacles.append(obstacle_at(sim.player.x, sim.player.y, size=64))

    report = manager.resolve(sim)

    assert sim.player.size == 0.0
    assert report.died is True


def test_offscreen_obstacle_removed(manager, playing_sim):
    sim = playing_sim
    leaving = obstacle_at(100, sim.screen_height + 32, size=32)
    staying = obstacle_at(100, sim.screen_height + 31, size=32)
    sim.obstacles.extend([leaving, staying])

    manager.resolve(sim)

    assert sim.obstacles == [staying]


def test_collided_obstacle_removed_on_next_pass(manager, playing_sim):
    sim = playing_sim
    marked = obstacle_at(100, 100, collided=True)
    sim.obstacles.append(marked)

    manager.resolve(sim)

    assert marked not in sim.obstacles


def test_collided_obstacle_does_not_damage_player(manager, playing_sim):
    sim = playing_sim
    sim.obstacles.append(obstacle_at(sim.player.x, sim.player.y, collided=True))

    manager.resolve(sim)

    assert sim.player.size == sim.config.circle_size


# ===========================================================
# Pass 2: Bullets vs Squares
# ===========================================================

def test_bullet_kill_heals_and_rewards(manager, playing_sim):
    sim = playing_sim
    sim.player.size = 30.0
    target = obstacle_at(100, 100, size=16)
    sim.obstacles.append(target)
    sim.bullets.append(bullet_at(100, 100))

    report = manager.resolve(sim)

    assert sim.player.size == pytest.approx(32.0)
    assert sim.score == 40
    assert sim.bullets == []
    assert target.collided is True
    assert report.obstacles_destroyed == 1


def test_bullet_marked_obstacle_survives_until_next_frame(manager, playing_sim):
    sim = playing_sim
    target = obstacle_at(100, 100, size=16)
    sim.obstacles.append(target)
    sim.bullets.append(bullet_at(100, 100))

    manager.resolve(sim)
    assert target in sim.obstacles

    manager.resolve(sim)
    assert target not in sim.obstacles


def test_bullet_consumed_by_first_hit_only(manager, playing_sim):
    sim = playing_sim
    first = obstacle_at(100, 100, size=32)
    second = obstacle_at(105, 100, size=32)
    sim.obstacles.extend([first, second])
    sim.bullets.append(bullet_at(102, 100))

    report = manager.resolve(sim)

    assert first.collided is True
    assert second.collided is False
    assert report.obstacles_destroyed == 1


def test_two_bullets_cannot_kill_same_obstacle(manager, playing_sim):
    sim = playing_sim
    target = obstacle_at(100, 100, size=32)
    sim.obstacles.append(target)
    sim.bullets.extend([bullet_at(100, 100), bullet_at(101, 100)])

    report = manager.resolve(sim)

    assert report.obstacles_destroyed == 1
    assert len(sim.bullets) == 1


def test_bullet_leaving_top_removed(manager, playing_sim):
    sim = playing_sim
    gone = bullet_at(100, -2.0)      # y <= -size/2
    visible = bullet_at(100, -1.9)
    sim.bullets.extend([gone, visible])

    manager.resolve(sim)

    assert sim.bullets == [visible]


def test_every_overlap_penalised_in_death_frame(manager, playing_sim):
    sim = playing_sim
    sim.player.size = 1.0
    sim.score = 100
    sim.obstacles.extend([
        obstacle_at(sim.player.x, sim.player.y, size=32),
        obstacle_at(sim.player.x, sim.player.y, size=32),
    ])

    report = manager.resolve(sim)

    assert sim.score == 60
    assert sim.player.size == 0.0
    assert sim.obstacles == []
    assert report.player_hits == 2
    assert report.died is True
    assert report.score_at_death == 80


def test_bullet_pass_runs_after_death(manager, playing_sim):
    sim = playing_sim
    sim.player.size = 1.0
    sim.score = 0
    sim.obstacles.append(obstacle_at(sim.player.x, sim.player.y, size=32))
    target = obstacle_at(100, 100, size=16)
    sim.obstacles.append(target)
    sim.bullets.append(bullet_at(100, 100))

    report = manager.resolve(sim)

    assert report.died is True
    assert report.score_at_death == 0
    assert target.collided is True
    assert report.obstacles_destroyed == 1
    assert sim.score == 40
    assert sim.player.size == pytest.approx(4.0)


def test_player_hit_resolved_before_bullets(manager, playing_sim):
    sim = playing_sim
    sim.score = 0
    hazard = obstacle_at(sim.player.x, sim.player.y, size=32)
    sim.obstacles.append(hazard)
    sim.bullets.append(bullet_at(sim.player.x, sim.player.y))

    report = manager.resolve(sim)

    # The square was consumed by the player before the bullet pass ran
    assert report.player_hits == 1
    assert report.obstacles_destroyed == 0
    assert sim.score == 0
    assert len(sim.bullets) == 1


# ===========================================================
# Invariants
# ===========================================================

def test_health_and_score_stay_in_range_over_random_frames(manager, playing_sim):
    sim = playing_sim
    rng = random.Random(7)
    cfg = sim.config

    for _ in range(300):
        for _ in range(rng.randint(0, 3)):
            sim.obstacles.append(obstacle_at(
                sim.player.x + rng.uniform(-40, 40),
                sim.player.y + rng.uniform(-40, 40),
                size=rng.uniform(cfg.square_min_size, cfg.square_max_size),
            ))
        for _ in range(rng.randint(0, 3)):
            sim.bullets.append(bullet_at(rng.uniform(0, 800), rng.uniform(0, 600)))
            sim.obstacles.append(obstacle_at(rng.uniform(0, 800), rng.uniform(0, 600), size=16))

        manager.resolve(sim)

        assert 0 <= sim.player.size <= cfg.circle_size
        assert sim.score >= 0
        assert isinstance(sim.score, int)

        if sim.player.size <= 0:
            sim.player.size = cfg.circle_size
