"""
entity_registry.py
------------------
Factory mapping each EntityKind to the class that implements it.

The sprite metadata table names an EntityKind per sprite, so choosing what
to spawn stays data-driven while the set of variants stays closed.
"""

from invaders.entities.alien import Alien
from invaders.entities.alien_flock import AlienFlock
from invaders.entities.entity_types import EntityKind
from invaders.entities.missile import Missile
from invaders.entities.player import Player
from invaders.entities.shield import Shield


ENTITY_CLASSES = {
    EntityKind.PLAYER: Player,
    EntityKind.ALIEN: Alien,
    EntityKind.ALIEN_FLOCK: AlienFlock,
    EntityKind.MISSILE: Missile,
    EntityKind.SHIELD: Shield,
}


def create_entity(kind: EntityKind, **opts):
    """Construct the entity variant for `kind`, forwarding spawn options."""
    return ENTITY_CLASSES[kind](**opts)
