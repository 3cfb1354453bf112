"""
movement.py
-----------
Per-frame movement integration for all entities.

Responsibilities
----------------
- Move the player by the held direction axes at a fixed movement speed.
- Scroll obstacles down and bullets up by their own speed.
- Clamp the player inside the screen by half its size.

Each axis is integrated independently, so holding two directions moves the
player faster along the diagonal than along a single axis.
"""


def move_player(player, axis, movement_speed: float, dt: float):
    """
    Offset the player by input axis * speed * dt.

    Args:
        player: Player Shape
        axis: (x, y) tuple, each component in {-1, 0, 1}
        movement_speed: Pixels per second along each axis
        dt: Elapsed seconds since last frame
    """
    axis_x, axis_y = axis
    player.x += axis_x * movement_speed * dt
    player.y += axis_y * movement_speed * dt


def move_obstacles(obstacles, dt: float):
    """Scroll obstacles downward."""
    for obstacle in obstacles:
        obstacle.y += obstacle.speed * dt


def move_bullets(bullets, dt: float):
    """Move bullets upward."""
    for bullet in bullets:
        bullet.y -= bullet.speed * dt


def clamp_to_screen(player, screen_width: float, screen_height: float):
    """Keep the player inside the screen by a margin of size/2."""
    half = player.size / 2.0
    player.x = max(half, min(player.x, screen_width - half))
    player.y = max(half, min(player.y, screen_height - half))


def integrate(state, axis, dt: float):
    """
    Advance every entity in the simulation state by dt.

    Runs before collision resolution, so the clamp uses the player's size
    from before any damage this frame.
    """
    cfg = state.config
    move_player(state.player, axis, cfg.movement_speed, dt)
    move_obstacles(state.obstacles, dt)
    move_bullets(state.bullets, dt)
    clamp_to_screen(state.player, state.screen_width, state.screen_height)
