"""
base_scene.py
-------------
Abstract base class for menu-style screens.

A screen can be installed wherever a Board can: it answers the whole
Board interface, with inert entity operations, and implements its own
step and render.
"""

from abc import ABC, abstractmethod


class BaseScene(ABC):
    """
    Attributes:
        game: GameLoop context (surface size, load_board)
    """

    def __init__(self, game):
        self.game = game
        self.objects = []
        self.removed = []
        self.missiles = 0
        self.level = 0
        self.player = None

    # ===========================================================
    # Inert Board Operations
    # ===========================================================

    def add(self, entity):
        return entity

    def remove(self, entity):
        pass

    def add_sprite(self, name, x, y, **opts):
        return None

    def collision(self, a, b) -> bool:
        return False

    def collide(self, entity):
        return None

    def load_level(self, grid):
        pass

    def next_level(self):
        return None

    # ===========================================================
    # Frame Protocol
    # ===========================================================

    def input(self, dt: float, keys):
        pass

    @abstractmethod
    def step(self, dt: float, keys):
        """React to the held keys for this frame."""

    @abstractmethod
    def render(self, surface):
        """Draw the whole screen."""

    def _clear(self, surface):
        surface.clear_rect(0, 0, self.game.width, self.game.height)
