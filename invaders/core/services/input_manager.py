"""
input_manager.py
----------------
Keyboard to logical-key mapping.

Provides:
- InputState: immutable snapshot of the held logical keys for one frame
- InputManager: tracks held state from pygame key events and reports
  press-only actions (speed control, pause)
"""

from dataclasses import dataclass

import pygame

from invaders.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    # Held keys, readable through InputState
    "held": {
        "left": [pygame.K_LEFT, pygame.K_a],
        "right": [pygame.K_RIGHT, pygame.K_d],
        "up": [pygame.K_UP, pygame.K_w],
        "down": [pygame.K_DOWN, pygame.K_s],
        "fire": [pygame.K_SPACE],
    },
    # Press-only actions, reported once per KEYDOWN
    "press": {
        "speedup": [pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS],
        "speeddown": [pygame.K_MINUS, pygame.K_KP_MINUS],
        "pause": [pygame.K_p],
    },
}


@dataclass(frozen=True)
class InputState:
    """Logical keys held during one frame."""
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False

    def __getitem__(self, key: str) -> bool:
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key) from None

    @classmethod
    def from_keys(cls, keys) -> "InputState":
        """Build a snapshot from any mapping of logical key -> held."""
        return cls(**{name: bool(keys.get(name, False)) for name in ("left", "right", "up", "down", "fire")})


class InputManager:
    """
    Tracks logical key state from pygame keyboard events.

    Usage:
        action = input_manager.handle_event(event)   # "speedup" / "pause" / None
        keys = input_manager.state()                 # InputState for this frame
    """

    def __init__(self, key_bindings=None):
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS

        self._held_lookup = {
            key: name
            for name, keys in self.key_bindings["held"].items()
            for key in keys
        }
        self._press_lookup = {
            key: name
            for name, keys in self.key_bindings["press"].items()
            for key in keys
        }
        self._held = {name: False for name in self.key_bindings["held"]}

        DebugLogger.init_entry("InputManager")

    def handle_event(self, event):
        """
        Update held state from a keyboard event.

        Returns:
            str | None: Name of a press-only action triggered by this event
        """
        if event.type == pygame.KEYDOWN:
            name = self._held_lookup.get(event.key)
            if name is not None:
                self._held[name] = True
            action = self._press_lookup.get(event.key)
            if action is not None:
                DebugLogger.trace(f"Action pressed: {action}", category="input")
            return action

        if event.type == pygame.KEYUP:
            name = self._held_lookup.get(event.key)
            if name is not None:
                self._held[name] = False
        return None

    def release_all(self):
        """Drop every held key, e.g. when the window loses focus."""
        for name in self._held:
            self._held[name] = False

    def state(self) -> InputState:
        return InputState.from_keys(self._held)
