"""
base_entity.py
--------------
Foundational class for everything a Board simulates.

Coordinate System
-----------------
Positions are top-left based, in the same pixel space as the drawing
surface. (x, y, w, h) is the axis-aligned box used for collisions and
drawing.

Board Handle
------------
An entity keeps only a weak reference to the Board that owns it. The
Board owns its entities; entities reach the game context through it.
"""

import weakref

from invaders.entities.entity_types import EntityKind


class BaseEntity:
    """
    Base class for Player, Alien, AlienFlock, Missile and Shield.

    Step protocol:
        step(dt, keys) -> bool   False asks the Board to retire the entity
        die()                    death with effects (sound, callbacks, ...)
        draw(surface)            render through the sprite atlas
    """

    kind: EntityKind = None
    invulnerable = False

    def __init__(self, **opts):
        self.x = 0.0
        self.y = 0.0
        self.w = 0
        self.h = 0
        self.name = ""
        self.frame = 0
        self._board_ref = None

    def __repr__(self):
        return f"<{type(self).__name__} {self.name!r} at ({self.x:.1f}, {self.y:.1f})>"

    # ===========================================================
    # Board Handle
    # ===========================================================

    def attach(self, board):
        self._board_ref = weakref.ref(board)

    @property
    def attached(self) -> bool:
        return self._board_ref is not None and self._board_ref() is not None

    @property
    def board(self):
        board = self._board_ref() if self._board_ref is not None else None
        if board is None:
            raise RuntimeError(f"{type(self).__name__} is not attached to a board")
        return board

    @property
    def game(self):
        return self.board.game

    # ===========================================================
    # Step Protocol
    # ===========================================================

    def step(self, dt: float, keys) -> bool:
        return True

    def die(self):
        self.board.remove(self)

    def draw(self, surface):
        self.game.atlas.draw(surface, self.name, self.x, self.y, self.frame)
