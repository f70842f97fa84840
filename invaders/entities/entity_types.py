"""
entity_types.py
---------------
Closed set of entity variants. Sprite metadata names one of these per
sprite, and the entity factory maps each variant to its class.
"""

from enum import Enum


class EntityKind(Enum):
    PLAYER = "player"
    ALIEN = "alien"
    ALIEN_FLOCK = "alien_flock"
    MISSILE = "missile"
    SHIELD = "shield"
