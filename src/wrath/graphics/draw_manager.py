"""
draw_manager.py
---------------
Centralized rendering manager for batching and layered draw calls.

Responsibilities:
- Maintain layered draw queues for shapes and text
- Measure and render text with cached fonts
- Render queued requests onto the target surface
"""

import pygame

from wrath.core.debug.debug_logger import DebugLogger
from wrath.core.runtime.game_settings import Fonts, Palette


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        """Initialize draw manager with empty queues."""
        self.shape_layers = {}    # {layer: [(shape_type, rect, color, kwargs), ...]}
        self.text_layers = {}     # {layer: [(text, font_size, pos, color, anchor), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False

        self.background_color = Palette.BACKGROUND
        self._fonts = {}

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for layer_items in self.shape_layers.values():
            layer_items.clear()
        for layer_items in self.text_layers.values():
            layer_items.clear()

    def _touch_layer(self, queues, layer):
        if layer not in queues:
            queues[layer] = []
            self._layers_dirty = True
        return queues[layer]

    def queue_shape(self, shape_type, rect, color, layer=0, **kwargs):
        """
        Queue a primitive shape.

        Args:
            shape_type: "rect" or "circle"
            rect: pygame.Rect bounds (circles use its centre and width)
            color: RGB or RGBA tuple
            layer: Render layer
            **kwargs: Shape-specific params (width)
        """
        self._touch_layer(self.shape_layers, layer).append((shape_type, rect, color, kwargs))

    def queue_text(self, text, font_size, pos, color, layer=0, anchor="center"):
        """
        Queue a line of text.

        Args:
            text: String to draw
            font_size: Font size in points
            pos: (x, y) anchor position
            color: RGB tuple
            layer: Render layer
            anchor: pygame.Rect attribute the position refers to ("center", "topleft", ...)
        """
        self._touch_layer(self.text_layers, layer).append((text, font_size, pos, color, anchor))

    def queued_count(self):
        shapes = sum(len(items) for items in self.shape_layers.values())
        texts = sum(len(items) for items in self.text_layers.values())
        return shapes, texts

    # ===========================================================
    # Text
    # ===========================================================

    def get_font(self, font_size):
        """Return a cached default font of the given size."""
        font = self._fonts.get(font_size)
        if font is None:
            font = pygame.font.Font(Fonts.DEFAULT, font_size)
            self._fonts[font_size] = font
        return font

    def measure_text(self, text, font_size):
        """Return (width, height) of the rendered text."""
        return self.get_font(font_size).size(text)

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """Draw every queued item onto target_surface, lowest layer first."""
        target_surface.fill(self.background_color)

        if self._layers_dirty:
            all_layers = set(self.shape_layers.keys()) | set(self.text_layers.keys())
            self._layer_keys_cache = sorted(all_layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            for shape_type, rect, color, kwargs in self.shape_layers.get(layer, ()):
                self._draw_shape(target_surface, shape_type, rect, color, **kwargs)

            for text, font_size, pos, color, anchor in self.text_layers.get(layer, ()):
                surf = self.get_font(font_size).render(text, True, color)
                rect = surf.get_rect(**{anchor: pos})
                target_surface.blit(surf, rect)

    def _draw_shape(self, surface, shape_type, rect, color, **kwargs):
        """
        Draw primitive shape on surface.

        Translucent colors are drawn through an intermediate SRCALPHA surface.
        """
        width = kwargs.get("width", 0)

        if shape_type not in ("rect", "circle"):
            DebugLogger.warn(f"Unknown shape type: {shape_type}", category="render")
            return

        target, target_rect = surface, rect
        if len(color) == 4:
            target = pygame.Surface(rect.size, pygame.SRCALPHA)
            target_rect = pygame.Rect(0, 0, rect.width, rect.height)

        if shape_type == "rect":
            pygame.draw.rect(target, color, target_rect, width)
        else:
            pygame.draw.circle(target, color, target_rect.center, target_rect.width / 2, width)

        if target is not surface:
            surface.blit(target, rect.topleft)
