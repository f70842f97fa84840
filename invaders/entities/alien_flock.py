"""
alien_flock.py
--------------
Invisible coordinator shared by every Alien on a board.

Each step the flock:
- applies one descent step when the sweep direction has flipped
- publishes the horizontal delta (speed * direction) the aliens drift by
- rebuilds the per-column lowest-alien table used for fire eligibility
- reports the level cleared once no aliens remain
"""

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import FlockSettings
from invaders.entities.base_entity import BaseEntity
from invaders.entities.entity_types import EntityKind


class AlienFlock(BaseEntity):
    kind = EntityKind.ALIEN_FLOCK
    invulnerable = True

    def __init__(self, **opts):
        super().__init__(**opts)
        self.name = "alien_flock"

        self.dx = FlockSettings.INITIAL_DX
        self.dy = 0
        self.hit = 1         # sweep direction, flipped by aliens at the edges
        self.last_hit = 0
        self.speed = FlockSettings.INITIAL_SPEED

        self.max_y = {}      # column x -> lowest alien y
        self.alien_count = 0
        self.cleared = False

    def draw(self, surface):
        pass

    def step(self, dt, keys):
        if self.hit and self.hit != self.last_hit:
            self.last_hit = self.hit
            self.dy = self.speed
        else:
            self.dy = 0
        self.dx = self.speed * self.hit

        max_y = {}
        count = 0
        for entity in self.board.objects:
            if entity.kind is EntityKind.ALIEN:
                if entity.x not in max_y or entity.y > max_y[entity.x]:
                    max_y[entity.x] = entity.y
                count += 1

        self.max_y = max_y
        self.alien_count = count

        if count == 0:
            self.die()
        return True

    def die(self):
        """Level clear: advance to the next level, or win after the last one."""
        if self.cleared:
            return
        self.cleared = True

        board = self.board
        game = board.game
        next_level = board.next_level()

        if next_level is not None:
            DebugLogger.action(f"Level {board.level} cleared", category="level")
            game.advance_level(next_level)
        else:
            DebugLogger.action("Final level cleared", category="level")
            game.callbacks.win()
