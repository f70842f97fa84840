"""
shield.py
---------
Static shield block. A single hit destroys it.
"""

from invaders.entities.base_entity import BaseEntity
from invaders.entities.entity_types import EntityKind


class Shield(BaseEntity):
    kind = EntityKind.SHIELD

    def hit(self):
        self.game.audio.play("die")
        self.board.remove(self)

    def die(self):
        # No damage model yet: any lethal hit is a destroying hit
        self.hit()
