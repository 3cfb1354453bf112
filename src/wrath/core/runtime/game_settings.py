"""
game_settings.py
----------------
Centralized constants for all game systems.

Gameplay groups (Player, Obstacles, Combat) are the defaults behind
SimulationConfig and can be overridden from gameplay.yaml.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    FPS: int = 60
    CAPTION: str = "wrath"


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    DEFAULT = None  # pygame default font
    HUD_SIZE: int = 25
    PROMPT_SIZE: int = 50
    TITLE_SIZE: int = 50


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing. Simulation runs on variable dt."""
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Gameplay
# ===========================================================

class Player:
    """Player circle defaults. Size doubles as health."""
    CIRCLE_SIZE: float = 32.0
    MOVEMENT_SPEED: float = 200.0


class Obstacles:
    """Falling square spawn parameters."""
    SQUARE_MIN_SIZE: float = 16.0
    SQUARE_MAX_SIZE: float = 64.0
    MIN_SPEED: float = 50.0
    MAX_SPEED: float = 150.0
    SPAWN_CHANCE: int = 5       # out of SPAWN_ROLL per frame
    SPAWN_ROLL: int = 100


class Combat:
    """Damage, healing, scoring and firing."""
    BASE_DAMAGE: float = 2.0
    BASE_SCORE: int = 10
    SIZE_UNIT: float = 16.0
    FIRE_RATE: float = 0.5      # seconds between shots at full health
    MAX_FIRE_RATE_MULTIPLIER: float = 2.0
    BULLET_SIZE: float = 4.0


# ===========================================================
# Background
# ===========================================================

class Background:
    """Decorative starfield. No gameplay effect."""
    DIRECTION_RATE: float = 0.05    # modifier change per second of horizontal input
    STAR_COUNT: int = 120
    STAR_SEED: int = 7
    DRIFT_SPEED: float = 20.0       # pixels per second, downward


# ===========================================================
# Storage
# ===========================================================

class Storage:
    HIGHSCORE_FILE: str = "highscore.dat"
    GAMEPLAY_CONFIG: str = "gameplay.yaml"


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    BULLETS: int = 200
    ENEMIES: int = 300
    PLAYER: int = 400
    UI: int = 600
    OVERLAY: int = 700
    DEBUG: int = 900


# ===========================================================
# Colors
# ===========================================================

class Palette:
    BACKGROUND = (0, 121, 241)
    PLAYER = (253, 249, 0)
    OBSTACLE = (0, 228, 48)
    BULLET = (230, 41, 55)
    TEXT = (255, 255, 255)
    HIGHLIGHT = (255, 161, 0)
    OVERLAY = (0, 0, 0, 140)


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    SHOW_FPS: bool = True
    FRAME_TIME_WARNING: float = 16.67
    HUD_VISIBLE: bool = False
