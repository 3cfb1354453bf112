"""
state_machine.py
----------------
Per-frame dispatch over the four game states.

Transitions
-----------
    MAIN_MENU --fire--> PLAYING        (session reset)
    MAIN_MENU --cancel--> exit
    PLAYING --cancel--> PAUSED
    PAUSED --cancel--> PLAYING
    PLAYING --health 0--> GAME_OVER    (high score saved if beaten)
    GAME_OVER --cancel--> MAIN_MENU

Only PLAYING advances the simulation. Within a playing frame the order is
fire control, spawner, movement, collision/scoring.
"""

from wrath.core.debug.debug_logger import DebugLogger
from wrath.core.runtime.game_settings import Background
from wrath.scenes.game_state import GameState
from wrath.systems.collision_manager import CollisionManager
from wrath.systems.combat import FireControl
from wrath.systems.movement import integrate
from wrath.systems.spawner import ObstacleSpawner


class GameStateMachine:
    """Owns the simulation systems and steps a SimulationState each frame."""

    def __init__(self, config, highscore_store=None):
        """
        Args:
            config: SimulationConfig shared by all systems
            highscore_store: Persistence adapter with save(score) (optional)
        """
        self.config = config
        self.highscore_store = highscore_store
        self.spawner = ObstacleSpawner(config)
        self.fire_control = FireControl(config)
        self.collision_manager = CollisionManager(config)
        self.last_report = None

    # ===========================================================
    # Frame Dispatch
    # ===========================================================
    def step(self, sim, frame, dt: float) -> bool:
        """
        Advance one frame.

        Args:
            sim: SimulationState to mutate
            frame: InputFrame for this frame
            dt: Elapsed seconds since last frame

        Returns:
            bool: False when the game should exit
        """
        match sim.state:
            case GameState.MAIN_MENU:
                return self._update_main_menu(sim, frame)
            case GameState.PLAYING:
                self._update_playing(sim, frame, dt)
            case GameState.PAUSED:
                self._update_paused(sim, frame)
            case GameState.GAME_OVER:
                self._update_game_over(sim, frame)
        return True

    # ===========================================================
    # State Handlers
    # ===========================================================
    def _update_main_menu(self, sim, frame) -> bool:
        if frame.fire:
            sim.reset()
            self._transition(sim, GameState.PLAYING)
        elif frame.cancel:
            DebugLogger.action("Exit requested from main menu", category="game_state")
            return False
        return True

    def _update_playing(self, sim, frame, dt):
        if frame.cancel:
            self._transition(sim, GameState.PAUSED)
            return

        sim.clock += dt
        self.fire_control.try_fire(sim, frame.fire, sim.clock)
        self.spawner.update(sim.obstacles, sim.rng, sim.screen_width)

        axis = frame.axis
        integrate(sim, axis, dt)
        sim.direction_modifier += axis[0] * Background.DIRECTION_RATE * dt

        self.last_report = self.collision_manager.resolve(sim)
        if self.last_report.died:
            self._game_over(sim, self.last_report.score_at_death)

    def _update_paused(self, sim, frame):
        if frame.cancel:
            self._transition(sim, GameState.PLAYING)

    def _update_game_over(self, sim, frame):
        if frame.cancel:
            self._transition(sim, GameState.MAIN_MENU)

    # ===========================================================
    # Helpers
    # ===========================================================
    def _game_over(self, sim, final_score):
        """Enter GAME_OVER and record a beaten high score."""
        if final_score > sim.high_score:
            sim.high_score = final_score
            sim.new_high_score = True
            if self.highscore_store is not None:
                self.highscore_store.save(final_score)
            DebugLogger.action(f"New high score: {final_score}", category="game_state")

        self._transition(sim, GameState.GAME_OVER)

    def _transition(self, sim, new_state):
        DebugLogger.state(f"[{sim.state.name}] -> [{new_state.name}]", category="game_state")
        sim.state = new_state
