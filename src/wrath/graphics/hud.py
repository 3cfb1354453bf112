"""
hud.py
------
Turns a SimulationState into draw requests.

Responsibilities
----------------
- Queue the player, squares and bullets while playing or paused.
- Queue score and high score text in the corners.
- Queue the static overlays for the menu, pause and game over screens.
"""

import pygame

from wrath.core.runtime.game_settings import Fonts, Layers, Palette
from wrath.scenes.game_state import GameState

HUD_MARGIN = 10

MENU_PROMPT = "Press space"
PAUSED_TEXT = "PAUSED"
GAME_OVER_TEXT = "GAME OVER!"
NEW_HIGH_SCORE_TEXT = "Congratulations! New high score!"


def shape_rect(shape):
    """Integer pygame.Rect covering a shape's collision square."""
    rect = pygame.Rect(0, 0, round(shape.size), round(shape.size))
    rect.center = (round(shape.x), round(shape.y))
    return rect


# ===========================================================
# Per-State Drawing
# ===========================================================

def draw_state(sim, draw_manager):
    """Queue everything visible for the current game state."""
    match sim.state:
        case GameState.MAIN_MENU:
            draw_main_menu(sim, draw_manager)
        case GameState.PLAYING:
            draw_entities(sim, draw_manager)
            draw_scores(sim, draw_manager)
        case GameState.PAUSED:
            draw_entities(sim, draw_manager)
            draw_scores(sim, draw_manager)
            draw_centered(sim, draw_manager, PAUSED_TEXT, Fonts.TITLE_SIZE)
        case GameState.GAME_OVER:
            draw_entities(sim, draw_manager)
            draw_scores(sim, draw_manager)
            draw_game_over(sim, draw_manager)


def draw_entities(sim, draw_manager):
    for bullet in sim.bullets:
        draw_manager.queue_shape("circle", shape_rect(bullet), Palette.BULLET, layer=Layers.BULLETS)

    for obstacle in sim.obstacles:
        draw_manager.queue_shape("rect", shape_rect(obstacle), Palette.OBSTACLE, layer=Layers.ENEMIES)

    if sim.player.size > 0:
        draw_manager.queue_shape("circle", shape_rect(sim.player), Palette.PLAYER, layer=Layers.PLAYER)


def draw_scores(sim, draw_manager):
    """Score top-left, high score right-aligned top-right."""
    draw_manager.queue_text(
        f"Score: {sim.score}", Fonts.HUD_SIZE,
        (HUD_MARGIN, HUD_MARGIN), Palette.TEXT,
        layer=Layers.UI, anchor="topleft"
    )

    high_score_text = f"High score: {sim.high_score}"
    width, _ = draw_manager.measure_text(high_score_text, Fonts.HUD_SIZE)
    draw_manager.queue_text(
        high_score_text, Fonts.HUD_SIZE,
        (sim.screen_width - width - HUD_MARGIN, HUD_MARGIN), Palette.TEXT,
        layer=Layers.UI, anchor="topleft"
    )


def draw_main_menu(sim, draw_manager):
    draw_centered(sim, draw_manager, MENU_PROMPT, Fonts.PROMPT_SIZE)


def draw_game_over(sim, draw_manager):
    draw_centered(sim, draw_manager, GAME_OVER_TEXT, Fonts.TITLE_SIZE)
    if sim.new_high_score:
        draw_centered(
            sim, draw_manager, NEW_HIGH_SCORE_TEXT, Fonts.HUD_SIZE,
            offset_y=Fonts.TITLE_SIZE, color=Palette.HIGHLIGHT
        )


def draw_centered(sim, draw_manager, text, font_size, offset_y=0, color=Palette.TEXT):
    """Queue a translucent backdrop plus text at the screen centre."""
    center = (sim.screen_width / 2.0, sim.screen_height / 2.0 + offset_y)
    width, height = draw_manager.measure_text(text, font_size)

    backdrop = pygame.Rect(0, 0, width + 2 * HUD_MARGIN, height + 2 * HUD_MARGIN)
    backdrop.center = (round(center[0]), round(center[1]))
    draw_manager.queue_shape("rect", backdrop, Palette.OVERLAY, layer=Layers.OVERLAY)
    draw_manager.queue_text(text, font_size, center, color, layer=Layers.OVERLAY + 1)
