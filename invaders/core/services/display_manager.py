"""
display_manager.py
------------------
Window creation and frame presentation.

Responsibilities:
- Create the game window at the logical surface size
- Pre-render the vertical gradient painted behind every frame
- Flip the finished frame to the screen
"""

import pygame

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import Display


class DisplayManager:
    """Owns the pygame window and the gradient background surface."""

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT, caption=Display.CAPTION):
        DebugLogger.init_entry("DisplayManager")

        self.width = width
        self.height = height

        pygame.display.set_caption(caption)
        self.window = pygame.display.set_mode((width, height))
        self.background = self._build_gradient(
            (width, height), Display.BACKGROUND_TOP, Display.BACKGROUND_BOTTOM
        )
        DebugLogger.init_sub(f"Window {width}x{height}")

    @staticmethod
    def _build_gradient(size, top, bottom) -> pygame.Surface:
        """Vertical linear gradient from top colour to bottom colour."""
        width, height = size
        surface = pygame.Surface(size)
        span = max(height - 1, 1)
        for y in range(height):
            t = y / span
            color = tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))
            pygame.draw.line(surface, color, (0, y), (width - 1, y))
        return surface

    def get_surface(self) -> pygame.Surface:
        return self.window

    def present(self):
        pygame.display.flip()
