"""
simulation_config.py
--------------------
Immutable bundle of every gameplay constant used by the simulation.

Defaults come from game_settings; the bundled config/gameplay.yaml and an
optional gameplay.yaml in the working directory are merged on top.
"""

import os
from dataclasses import dataclass, fields

from wrath.core.debug.debug_logger import DebugLogger
from wrath.core.runtime.game_settings import Display, Player, Obstacles, Combat, Storage
from wrath.core.services.config_manager import load_config, PACKAGE_CONFIG_DIR


# Config section -> dataclass fields it may set
SECTIONS = {
    "display": ("screen_width", "screen_height"),
    "player": ("circle_size", "movement_speed"),
    "obstacles": ("square_min_size", "square_max_size", "min_speed", "max_speed",
                  "spawn_chance", "spawn_roll"),
    "combat": ("base_damage", "base_score", "size_unit", "fire_rate",
               "max_fire_rate_multiplier", "bullet_size"),
}


@dataclass(frozen=True)
class SimulationConfig:
    """Gameplay tuning values. Frozen so a running session cannot drift."""
    screen_width: float = float(Display.WIDTH)
    screen_height: float = float(Display.HEIGHT)

    circle_size: float = Player.CIRCLE_SIZE
    movement_speed: float = Player.MOVEMENT_SPEED

    square_min_size: float = Obstacles.SQUARE_MIN_SIZE
    square_max_size: float = Obstacles.SQUARE_MAX_SIZE
    min_speed: float = Obstacles.MIN_SPEED
    max_speed: float = Obstacles.MAX_SPEED
    spawn_chance: int = Obstacles.SPAWN_CHANCE
    spawn_roll: int = Obstacles.SPAWN_ROLL

    base_damage: float = Combat.BASE_DAMAGE
    base_score: int = Combat.BASE_SCORE
    size_unit: float = Combat.SIZE_UNIT
    fire_rate: float = Combat.FIRE_RATE
    max_fire_rate_multiplier: float = Combat.MAX_FIRE_RATE_MULTIPLIER
    bullet_size: float = Combat.BULLET_SIZE

    @property
    def bullet_speed(self) -> float:
        return 2.0 * self.movement_speed

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def defaults_dict(cls):
        """Return the built-in defaults in config-file layout."""
        base = cls()
        return {
            section: {name: getattr(base, name) for name in names}
            for section, names in SECTIONS.items()
        }

    @classmethod
    def from_dict(cls, data):
        """
        Build a config from a sectioned mapping.

        Unknown keys, values of the wrong type and sections that are not
        mappings are skipped with a warning.
        """
        types = {f.name: f.type for f in fields(cls)}
        values = {}

        for section, names in SECTIONS.items():
            section_data = data.get(section) or {}
            if not isinstance(section_data, dict):
                DebugLogger.warn(f"Config section '{section}' is not a mapping, ignored", category="loading")
                continue
            for key, value in section_data.items():
                if key not in names:
                    DebugLogger.warn(f"Unknown config key '{section}.{key}'", category="loading")
                    continue
                caster = int if types[key] in (int, "int") else float
                try:
                    values[key] = caster(value)
                except (TypeError, ValueError):
                    DebugLogger.warn(f"Invalid value for '{section}.{key}': {value!r}", category="loading")

        return cls(**values)

    @classmethod
    def load(cls, filename=None):
        """Load bundled defaults, then merge the user override file if present."""
        bundled = load_config(
            os.path.join(PACKAGE_CONFIG_DIR, "gameplay.yaml"),
            cls.defaults_dict(),
        )
        merged = load_config(filename or Storage.GAMEPLAY_CONFIG, bundled, search_dirs=["."])
        return cls.from_dict(merged)
