"""
debug_hud.py
------------
Lightweight developer overlay with performance metrics and entity counts.
Toggled with F3 through the InputManager system bindings.
"""

from wrath.core.debug.debug_logger import DebugLogger
from wrath.core.runtime.game_settings import Debug, Layers, Palette

FPS_SMOOTHING = 0.1
LINE_HEIGHT = 16
FONT_SIZE = 18


class DebugHUD:
    """Developer overlay with metrics."""

    def __init__(self):
        self.visible = Debug.HUD_VISIBLE

        self.smoothed_fps = 0.0
        self.frame_time = 0.0

        DebugLogger.init_entry("DebugHUD")

    def toggle(self):
        self.visible = not self.visible

    # ===========================================================
    # Metrics
    # ===========================================================
    def update(self, frame_time: float):
        """
        Record one frame.

        Args:
            frame_time: Seconds the last frame took
        """
        self.frame_time = frame_time
        if frame_time <= 0:
            return

        fps = 1.0 / frame_time
        if self.smoothed_fps == 0.0:
            self.smoothed_fps = fps
        else:
            self.smoothed_fps += (fps - self.smoothed_fps) * FPS_SMOOTHING

    def lines(self, sim):
        """Text lines shown in the overlay."""
        lines = []
        if Debug.SHOW_FPS:
            lines.append(f"FPS {self.smoothed_fps:5.1f}  ({self.frame_time * 1000:.2f} ms)")
        lines.extend([
            f"State {sim.state.name}",
            f"Obstacles {len(sim.obstacles)}  Bullets {len(sim.bullets)}",
            f"Health {sim.player.size:.2f}",
        ])
        return lines

    # ===========================================================
    # Rendering
    # ===========================================================
    def draw(self, draw_manager, sim):
        if not self.visible:
            return

        x = 10
        y = sim.screen_height - 10 - LINE_HEIGHT * 4
        for i, line in enumerate(self.lines(sim)):
            draw_manager.queue_text(
                line, FONT_SIZE, (x, y + i * LINE_HEIGHT), Palette.TEXT,
                layer=Layers.DEBUG, anchor="topleft"
            )
