"""
board.py
--------
Live simulation container for one level.

Responsibilities
----------------
- Own the ordered entity list (insertion order is draw order)
- Spawn entities from sprite names through the atlas and entity factory
- Run one step: every entity in order, then splice out this step's removals
- Render, AABB collision queries, level layout and next-level lookup

Removal Policy
--------------
remove() only queues. Queued entities are spliced out after the whole
sweep, so iteration order is stable while entities die mid-step. Entities
spawned during the sweep are appended and visited later in that same
sweep.
"""

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import AlienSettings, PlayerSettings, ShieldSettings
from invaders.core.services.input_manager import InputState
from invaders.entities.entity_registry import create_entity
from invaders.entities.entity_types import EntityKind
from invaders.systems.collision import collision


class Board:
    """Entity container driven once per frame by the GameLoop."""

    def __init__(self, game, level_number: int):
        """
        Args:
            game: Game context (width, height, atlas, audio, level_data,
                  callbacks, advance_level)
            level_number: Key into game.level_data
        """
        self.game = game
        self.objects = []
        self.removed = []
        self.missiles = 0
        self.level = level_number
        self.player = None

        grid = game.level_data.get(level_number)
        if grid is None:
            raise ValueError(f"No level data for level {level_number}")
        self.load_level(grid)

    # ===========================================================
    # Entity Management
    # ===========================================================

    def add(self, entity):
        entity.attach(self)
        self.objects.append(entity)
        return entity

    def remove(self, entity):
        """Queue entity for removal at the end of this step. Idempotent."""
        if entity not in self.removed:
            self.removed.append(entity)

    def add_sprite(self, name: str, x, y, **opts):
        """
        Spawn the entity variant registered for sprite `name` at (x, y).

        Raises:
            SpriteNotFoundError: name is not in the atlas
        """
        info = self.game.atlas.get(name)
        entity = create_entity(info.kind, **opts)
        entity.name = name
        entity.x = x
        entity.y = y
        entity.w = info.w
        entity.h = info.h
        return self.add(entity)

    def detect(self, predicate):
        """First entity (in list order) for which predicate holds, else None."""
        for entity in self.objects:
            if predicate(entity):
                return entity
        return None

    # ===========================================================
    # Frame Protocol
    # ===========================================================

    def input(self, dt: float, keys=None):
        pass

    def step(self, dt: float, keys=None):
        if keys is None:
            keys = InputState()

        self.removed = []

        # Entities appended during the sweep are visited in this same sweep
        for entity in self.objects:
            if not entity.step(dt, keys):
                entity.die()
                self.remove(entity)

        for entity in self.removed:
            for i, candidate in enumerate(self.objects):
                if candidate is entity:
                    del self.objects[i]
                    break

        if self.removed:
            DebugLogger.trace(f"Removed {len(self.removed)} entities", category="board")

    def render(self, surface):
        surface.clear_rect(0, 0, self.game.width, self.game.height)
        for entity in self.objects:
            entity.draw(surface)

    # ===========================================================
    # Collision
    # ===========================================================

    def collision(self, a, b) -> bool:
        return collision(a, b)

    def collide(self, entity):
        """First vulnerable entity other than `entity` overlapping it, else None."""
        return self.detect(
            lambda other: other is not entity
            and not other.invulnerable
            and collision(entity, other)
        )

    # ===========================================================
    # Levels
    # ===========================================================

    def load_level(self, grid):
        """
        Populate the board: player, shields, flock, then one alien per
        non-zero cell of `grid`.
        """
        game = self.game
        atlas = game.atlas
        width, height = game.width, game.height

        self.objects = []

        self.player = self.add_sprite(
            "player",
            width / 2,
            height - atlas.get("player").h - PlayerSettings.BOTTOM_MARGIN,
        )

        for name, offset in zip(ShieldSettings.SPRITES, ShieldSettings.X_OFFSETS):
            self.add_sprite(
                name,
                width / 2 + offset,
                height - atlas.get(name).h - ShieldSettings.BOTTOM_MARGIN,
            )

        flock = self.add(create_entity(EntityKind.ALIEN_FLOCK))

        aliens = 0
        for row, cells in enumerate(grid):
            for col, alien_type in enumerate(cells):
                if not alien_type:
                    continue
                name = f"alien{alien_type}"
                info = atlas.get(name)
                self.add_sprite(
                    name,
                    (info.w + AlienSettings.COLUMN_GAP) * col,
                    info.h * row,
                    flock=flock,
                )
                aliens += 1

        DebugLogger.state(f"Loaded level {self.level} ({aliens} aliens)", category="board")

    def next_level(self):
        """Number of the following level, or None after the last one."""
        next_level = self.level + 1
        return next_level if next_level in self.game.level_data else None
