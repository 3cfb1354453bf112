"""
game_loop.py
------------
Defines the main GameLoop class responsible for orchestrating the entire
runtime cycle of the game.

Responsibilities
----------------
- Initialize pygame and the window
- Load config and the stored high score, seed the RNG once
- Maintain the main timing loop (event -> update -> render)
- Maintain a DebugHUD independent of game state
"""

import time

import pygame

from wrath.core.debug.debug_hud import DebugHUD
from wrath.core.debug.debug_logger import DebugLogger
from wrath.core.runtime.game_settings import Debug, Display, Physics
from wrath.core.runtime.simulation_config import SimulationConfig
from wrath.core.services.highscore_store import HighScoreStore
from wrath.core.services.input_manager import InputManager
from wrath.graphics import hud
from wrath.graphics.draw_manager import DrawManager
from wrath.graphics.starfield import Starfield
from wrath.scenes.state_machine import GameStateMachine
from wrath.simulation import new_simulation


class GameLoop:
    """Core runtime controller that manages the game's main loop."""

    def __init__(self, config=None, highscore_store=None):
        """Initialize pygame and all foundational systems."""
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()

        self.config = config or SimulationConfig.load()
        size = (int(self.config.screen_width), int(self.config.screen_height))
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {size[0]}x{size[1]}")

        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        self.debug_hud = DebugHUD()
        self.starfield = Starfield(size[0], size[1])

        self.highscore_store = highscore_store or HighScoreStore()
        self.sim = new_simulation(self.config, high_score=self.highscore_store.load())
        self.state_machine = GameStateMachine(self.config, self.highscore_store)
        DebugLogger.init_entry("Simulation")
        DebugLogger.init_sub(f"High score {self.sim.high_score}")

        self.clock = pygame.time.Clock()
        self.running = True
        self._last_perf_warn_time = 0.0

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Main loop that runs until the game is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            # Only suspension point: wait for the next frame
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            dt = min(frame_time, Physics.MAX_FRAME_TIME)

            self._handle_events()
            if not self.running:
                break

            self.input_manager.update()
            frame = self.input_manager.snapshot()
            if not self.state_machine.step(self.sim, frame, dt):
                self.running = False

            self.debug_hud.update(frame_time)
            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================
    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            self.input_manager.handle_system_input(event, self.debug_hud)

    # ===========================================================
    # Rendering
    # ===========================================================
    def _draw(self):
        start = time.perf_counter()

        self.draw_manager.clear()
        self.starfield.draw(self.draw_manager, self.sim.clock, self.sim.direction_modifier)
        hud.draw_state(self.sim, self.draw_manager)
        self.debug_hud.draw(self.draw_manager, self.sim)

        self.draw_manager.render(self.screen)
        pygame.display.flip()

        frame_time_ms = (time.perf_counter() - start) * 1000
        if frame_time_ms > Debug.FRAME_TIME_WARNING:
            now = time.perf_counter()
            if now - self._last_perf_warn_time > 1.0:
                self._last_perf_warn_time = now
                DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f} ms", category="timing")
