"""
level_data.py
-------------
Loads and validates level layouts.

levels.json maps a level number to a grid of small integers:
0 is an empty cell, N spawns an alien using sprite 'alienN'.
"""

from typing import Dict, List

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.services.config_manager import load_config

LevelGrid = List[List[int]]


def parse_levels(raw: dict) -> Dict[int, LevelGrid]:
    """
    Convert a raw mapping (string or int keys) into {level: grid}.

    Raises:
        ValueError: Non-integer level key, non-list rows or invalid cells
    """
    levels = {}
    for key, grid in raw.items():
        if key == "_notes":
            continue
        try:
            level = int(key)
        except (TypeError, ValueError):
            raise ValueError(f"Level key must be an integer, got {key!r}") from None

        if not isinstance(grid, list) or not all(isinstance(row, list) for row in grid):
            raise ValueError(f"Level {level}: grid must be a list of rows")

        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                if not isinstance(cell, int) or isinstance(cell, bool) or cell < 0:
                    raise ValueError(f"Level {level}: invalid cell {cell!r} at row {y}, column {x}")

        levels[level] = [list(row) for row in grid]
    return levels


def load_levels(filename: str = "levels.json") -> Dict[int, LevelGrid]:
    """Load every level from the package config directory."""
    levels = parse_levels(load_config(filename, strict=True))
    if not levels:
        raise ValueError(f"{filename} defines no levels")

    DebugLogger.init_entry("Levels")
    DebugLogger.init_sub(f"{len(levels)} levels: {sorted(levels)}")
    return levels
