"""
invaders/entities/__init__.py
-----------------------------
Entity variants simulated by a Board.

Exports:
    EntityKind    - closed set of variants (PLAYER, ALIEN, ...)
    BaseEntity    - shared position/size/board-handle behaviour
    create_entity - factory mapping an EntityKind to its class
"""

from invaders.entities.entity_types import EntityKind
from invaders.entities.base_entity import BaseEntity
from invaders.entities.entity_registry import create_entity

__all__ = [
    'EntityKind',
    'BaseEntity',
    'create_entity',
]
