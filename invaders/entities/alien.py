"""
alien.py
--------
A single invader. Movement, descent and fire eligibility are coordinated
by the AlienFlock passed in at spawn time.
"""

import random

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import AlienSettings, MissileSettings
from invaders.entities.base_entity import BaseEntity
from invaders.entities.entity_types import EntityKind


class Alien(BaseEntity):
    kind = EntityKind.ALIEN

    def __init__(self, flock=None, **opts):
        super().__init__(**opts)
        self.flock = flock
        self.mx = 0.0
        self.dead = False

    def step(self, dt, keys):
        flock = self.flock
        self.mx += dt * flock.dx
        self.y += flock.dy

        if abs(self.mx) > AlienSettings.MOVE_THRESHOLD:
            if self.is_frontmost():
                self.fire_sometimes()

            self.x += self.mx
            self.mx = 0.0
            self.frame = (self.frame + 1) % AlienSettings.ANIMATION_FRAMES

            # Sweep boundaries, one sprite width in from each edge
            if self.x > self.game.width - self.w * 2:
                flock.hit = -1
            if self.x < self.w:
                flock.hit = 1
        return True

    def is_frontmost(self) -> bool:
        """True if this alien is the lowest one in its column."""
        return self.flock.max_y.get(self.x) == self.y

    def fire_sometimes(self):
        if random.random() >= AlienSettings.FIRE_CHANCE:
            return
        missile_w = self.game.atlas.get("missile").w
        self.board.add_sprite(
            "missile",
            self.x + self.w / 2 - missile_w / 2,
            self.y + self.h,
            dy=MissileSettings.SPEED,
        )
        DebugLogger.trace(f"{self.name} fired from column x={self.x:.1f}")

    def die(self):
        # Several missiles can land on the same alien in one sweep
        if self.dead:
            return
        self.dead = True

        self.game.audio.play("die")
        self.flock.speed += 1
        self.board.remove(self)
