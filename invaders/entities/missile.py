"""
missile.py
----------
Vertical projectile fired by the player (upwards) or an alien (downwards).
"""

from invaders.core.debug.debug_logger import DebugLogger
from invaders.entities.base_entity import BaseEntity
from invaders.entities.entity_types import EntityKind


class Missile(BaseEntity):
    kind = EntityKind.MISSILE

    def __init__(self, dy=0, player=False, **opts):
        super().__init__(**opts)
        self.name = "missile"
        self.dy = dy
        self.player = player
        self.exploded = False

    def step(self, dt, keys):
        if self.exploded:
            return False

        self.y += self.dy * dt

        enemy = self.board.collide(self)
        if enemy is not None:
            DebugLogger.trace(f"Missile hit {enemy!r}", category="collision")
            enemy.die()
            return False

        return not (self.y < 0 or self.y > self.game.height)

    def die(self):
        if self.exploded:
            return
        self.exploded = True

        board = self.board
        if self.player:
            board.missiles = max(board.missiles - 1, 0)
        board.remove(self)
