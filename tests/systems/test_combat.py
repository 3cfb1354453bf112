"""
test_combat.py
--------------
Unit tests for damage, healing and scoring rules and for FireControl.
"""

import pytest

from wrath.systems import combat
from wrath.systems.combat import FireControl


# ===========================================================
# Formulas
# ===========================================================

@pytest.mark.parametrize("value, expected", [
    (0.0, 0),
    (2.4, 2),
    (2.5, 3),
    (3.5, 4),
    (19.99, 20),
])
def test_round_half_up(value, expected):
    assert combat.round_half_up(value) == expected


def test_contact_damage_and_penalty_for_size_32(config):
    assert combat.contact_damage(config, 32) == pytest.approx(4.0)
    assert combat.contact_penalty(config, 32) == 20


def test_kill_reward_favours_small_squares(config):
    assert combat.kill_reward(config, 16) == 40
    assert combat.kill_reward(config, 64) == 10
    assert combat.kill_heal(config, 16) == pytest.approx(4.0)


def test_apply_damage_floors_at_zero(playing_sim, config):
    player = playing_sim.player
    player.size = 3.0

    applied = combat.apply_damage(player, config, 64)

    assert player.size == 0.0
    assert applied == pytest.approx(3.0)


def test_apply_heal_caps_at_circle_size(playing_sim, config):
    player = playing_sim.player
    player.size = 30.0
    combat.apply_heal(player, config, 16)
    assert player.size == config.circle_size


@pytest.mark.parametrize("score, amount, expected", [
    (50, 20, 30),
    (20, 20, 0),
    (9, 20, 0),
    (0, 5, 0),
])
def test_subtract_score_saturates(score, amount, expected):
    assert combat.subtract_score(score, amount) == expected


# ===========================================================
# Fire Control
# ===========================================================

@pytest.mark.parametrize("size, expected", [
    (32.0, 1.0),
    (24.0, 32.0 / 24.0),
    (16.0, 2.0),
    (8.0, 2.0),     # capped
    (0.0, 2.0),
])
def test_fire_rate_multiplier(config, size, expected):
    assert combat.fire_rate_multiplier(config, size) == pytest.approx(expected)


@pytest.fixture
def fire_control(config):
    return FireControl(config)


def test_fire_spawns_bullet_at_player(fire_control, playing_sim, config):
    sim = playing_sim
    sim.last_shot_time = 0.0

    bullet = fire_control.try_fire(sim, True, now=1.0)

    assert bullet is not None
    assert sim.bullets == [bullet]
    assert bullet.position == sim.player.position
    assert bullet.size == 4.0
    assert bullet.speed == pytest.approx(2 * config.movement_speed)
    assert sim.last_shot_time == 1.0


def test_held_fire_does_not_shoot(fire_control, playing_sim):
    playing_sim.last_shot_time = -10.0
    assert fire_control.try_fire(playing_sim, False, now=1.0) is None
    assert playing_sim.bullets == []


def test_second_shot_within_cooldown_rejected(fire_control, playing_sim, config):
    sim = playing_sim
    sim.last_shot_time = 0.0

    assert fire_control.try_fire(sim, True, now=1.0) is not None
    rejected = fire_control.try_fire(sim, True, now=1.0 + config.fire_rate / 2)

    assert rejected is None
    assert len(sim.bullets) == 1
    assert sim.last_shot_time == 1.0


def test_damaged_player_fires_faster(fire_control, playing_sim, config):
    sim = playing_sim
    sim.player.size = config.circle_size / 2    # multiplier 2.0
    sim.last_shot_time = 0.0

    assert fire_control.cooldown(sim.player.size) == pytest.approx(config.fire_rate / 2)
    assert fire_control.try_fire(sim, True, now=config.fire_rate * 0.6) is not None


def test_shot_exactly_at_cooldown_is_rejected(fire_control, playing_sim, config):
    playing_sim.last_shot_time = 0.0
    assert fire_control.try_fire(playing_sim, True, now=config.fire_rate) is None
