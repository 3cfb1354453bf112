"""
input_manager.py
----------------
Turns the keyboard into the six logical actions the game understands.

- Movement actions report whether they are held this frame
- Fire and cancel report the frame the key went down (rising edge), so
  holding a key never repeats a shot or a menu transition
- A separate "system" binding group holds hotkeys (F3 debug overlay) that
  work in every game state
"""

from dataclasses import dataclass

import pygame

from wrath.core.debug.debug_logger import DebugLogger
from wrath.core.runtime.input_frame import InputFrame


DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "move_left": [pygame.K_LEFT, pygame.K_a],
        "move_right": [pygame.K_RIGHT, pygame.K_d],
        "move_up": [pygame.K_UP, pygame.K_w],
        "move_down": [pygame.K_DOWN, pygame.K_s],
        "fire": [pygame.K_SPACE],
        "cancel": [pygame.K_ESCAPE],
    },
    "system": {
        "toggle_debug": [pygame.K_F3],
    },
}


@dataclass
class ActionState:
    """Held flag plus the edges produced by the last poll."""
    held: bool = False
    pressed: bool = False
    released: bool = False

    def advance(self, down: bool):
        self.pressed = down and not self.held
        self.released = self.held and not down
        self.held = down


class InputManager:
    """
    Polls the keyboard once per frame.

    Usage:
        input_manager.update()
        frame = input_manager.snapshot()
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {"gameplay": {...}, "system": {...}} (defaults if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._keys_for = {
            action: tuple(keys) for action, keys in self.key_bindings["gameplay"].items()
        }
        self._system_keys = {
            action: tuple(keys) for action, keys in self.key_bindings.get("system", {}).items()
        }
        self._states = {action: ActionState() for action in self._keys_for}

        self._check_conflicts()
        DebugLogger.init_entry("InputManager")

    def _check_conflicts(self):
        """A key bound both as a hotkey and a gameplay action would do two things."""
        hotkeys = {key for keys in self._system_keys.values() for key in keys}
        gameplay = {key for keys in self._keys_for.values() for key in keys}
        shared = hotkeys & gameplay
        if shared:
            DebugLogger.warn(f"Keys bound as both hotkey and action: {sorted(shared)}", category="input")

    # ===========================================================
    # Polling
    # ===========================================================

    def update(self, keys=None):
        """
        Sample key state and advance every action's edges.

        Args:
            keys: Indexable key-state table (defaults to pygame.key.get_pressed())
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        for action, state in self._states.items():
            state.advance(any(keys[key] for key in self._keys_for[action]))

    def snapshot(self) -> InputFrame:
        """The current frame's actions as an immutable InputFrame."""
        return InputFrame(
            left=self.action_held("move_left"),
            right=self.action_held("move_right"),
            up=self.action_held("move_up"),
            down=self.action_held("move_down"),
            fire=self.action_pressed("fire"),
            cancel=self.action_pressed("cancel"),
        )

    # ===========================================================
    # Queries
    # ===========================================================

    def action_held(self, action: str) -> bool:
        state = self._states.get(action)
        return state is not None and state.held

    def action_pressed(self, action: str) -> bool:
        state = self._states.get(action)
        return state is not None and state.pressed

    def action_released(self, action: str) -> bool:
        state = self._states.get(action)
        return state is not None and state.released

    # ===========================================================
    # Hotkeys
    # ===========================================================

    def handle_system_input(self, event, debug_hud=None):
        """
        React to hotkeys on KEYDOWN events, regardless of game state.

        Args:
            event: pygame event from the event queue
            debug_hud: Overlay toggled by the toggle_debug binding
        """
        if event.type != pygame.KEYDOWN or debug_hud is None:
            return

        if event.key in self._system_keys.get("toggle_debug", ()):
            debug_hud.toggle()
            DebugLogger.action(f"Debug overlay {'shown' if debug_hud.visible else 'hidden'}", category="input")
