"""
sprite_atlas.py
---------------
Sprite sheet loading and name-indexed drawing.

Metadata table format (sprites.json):
    {
        "alien1": {"sx": 0, "sy": 0, "w": 23, "h": 18, "frames": 2, "entity": "alien"},
        ...
    }

Animation frames sit side by side on the sheet: frame N of a sprite is
the region starting at sx + N * w.
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional

import pygame

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.errors import AssetLoadError, SpriteNotFoundError
from invaders.entities.entity_types import EntityKind


@dataclass(frozen=True)
class SpriteInfo:
    """Source region of one sprite plus the entity variant it spawns."""
    sx: int
    sy: int
    w: int
    h: int
    kind: EntityKind
    frames: int = 1


class SpriteAtlas:
    """Maps sprite name -> SpriteInfo and owns the loaded sheet image."""

    def __init__(self, metadata: Optional[dict] = None):
        self.map: Dict[str, SpriteInfo] = {}
        self.image = None
        if metadata:
            self.map = self.parse_metadata(metadata)

    # ===========================================================
    # Loading
    # ===========================================================

    @staticmethod
    def parse_metadata(metadata: dict) -> Dict[str, SpriteInfo]:
        """
        Validate a raw metadata table.

        Raises:
            ValueError: Missing field or unknown entity variant
        """
        parsed = {}
        for name, entry in metadata.items():
            if name == "_notes":
                continue
            try:
                parsed[name] = SpriteInfo(
                    sx=int(entry["sx"]),
                    sy=int(entry["sy"]),
                    w=int(entry["w"]),
                    h=int(entry["h"]),
                    kind=EntityKind(entry["entity"]),
                    frames=int(entry.get("frames", 1)),
                )
            except KeyError as e:
                raise ValueError(f"Sprite '{name}' is missing field {e}") from e
            except ValueError as e:
                raise ValueError(f"Sprite '{name}': {e}") from e
        return parsed

    def load(self, path: str, metadata: Optional[dict] = None):
        """
        Load the sheet image (and optionally replace the metadata table).

        Raises:
            AssetLoadError: Image missing/unreadable or metadata malformed
        """
        if metadata is not None:
            try:
                sprite_map = self.parse_metadata(metadata)
            except ValueError as e:
                raise AssetLoadError(path, str(e)) from e
        else:
            sprite_map = self.map

        if not os.path.exists(path):
            DebugLogger.fail(f"Missing sprite sheet at {path}", category="loading")
            raise AssetLoadError(path, "file not found")

        try:
            image = pygame.image.load(path)
        except pygame.error as e:
            DebugLogger.fail(f"Unreadable sprite sheet {path}: {e}", category="loading")
            raise AssetLoadError(path, str(e)) from e

        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()

        self.map = sprite_map
        self.image = image
        DebugLogger.init_entry("SpriteAtlas")
        DebugLogger.init_sub(f"{len(self.map)} sprites from {os.path.basename(path)}")

    # ===========================================================
    # Lookup & Drawing
    # ===========================================================

    def __contains__(self, name: str) -> bool:
        return name in self.map

    def get(self, name: str) -> SpriteInfo:
        try:
            return self.map[name]
        except KeyError:
            raise SpriteNotFoundError(name) from None

    def draw(self, surface, name: str, x, y, frame: int = 0):
        """Draw frame `frame` of sprite `name` with its top-left at (x, y)."""
        if self.image is None:
            raise RuntimeError("Sprites not loaded")

        s = self.map.get(name)
        if s is None:
            DebugLogger.warn(f"Sprite not found: {name}", category="loading")
            return

        surface.draw_image(
            self.image,
            s.sx + frame * s.w, s.sy, s.w, s.h,
            x, y, s.w, s.h,
        )
