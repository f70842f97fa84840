"""
player.py
---------
The player's cannon: horizontal movement, reload timer and firing.
"""

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import MissileSettings, PlayerSettings
from invaders.entities.base_entity import BaseEntity
from invaders.entities.entity_types import EntityKind


class Player(BaseEntity):
    kind = EntityKind.PLAYER

    def __init__(self, **opts):
        super().__init__(**opts)
        self.name = "player"
        self.reloading = PlayerSettings.INITIAL_RELOAD

    def step(self, dt, keys):
        game = self.game

        if keys["left"]:
            self.x -= PlayerSettings.SPEED * dt
        if keys["right"]:
            self.x += PlayerSettings.SPEED * dt

        if self.x < 0:
            self.x = 0
        if self.x > game.width - self.w:
            self.x = game.width - self.w

        # Counted in steps, not seconds
        self.reloading -= 1

        if keys["fire"] and self.can_fire():
            self.fire()
        return True

    def can_fire(self) -> bool:
        return self.reloading <= 0 and self.board.missiles < PlayerSettings.MAX_MISSILES

    def fire(self):
        board = self.board
        game = self.game
        missile_w = game.atlas.get("missile").w

        game.audio.play("fire")
        board.add_sprite(
            "missile",
            self.x + self.w / 2 - missile_w / 2,
            self.y - self.h,
            dy=-MissileSettings.SPEED,
            player=True,
        )
        board.missiles += 1
        self.reloading = PlayerSettings.RELOAD
        DebugLogger.trace(f"Player fired ({board.missiles} in flight)")

    def die(self):
        """Terminal for the run: no respawn, the host decides what comes next."""
        game = self.game
        game.audio.play("die")
        DebugLogger.state("Player destroyed", category="level")
        game.callbacks.die()
