"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Timing
# ===========================================================

class Display:
    """Window and drawing-surface configuration."""
    WIDTH: int = 500
    HEIGHT: int = 500
    FPS: int = 60
    CAPTION: str = "Space Invaders"

    # Vertical gradient painted behind every frame
    BACKGROUND_TOP = (0, 0, 0)
    BACKGROUND_BOTTOM = (211, 211, 211)


class Physics:
    """Frame timing."""
    MAX_FRAME_TIME: float = 0.1


class DebugSpeed:
    """Simulation speed control bound to the +/- keys."""
    DEFAULT: int = 30
    STEP: int = 10
    MIN: int = 0
    MAX: int = 100

    FONT_SIZE: int = 16
    COLOR = (243, 243, 21)


# ===========================================================
# Entities
# ===========================================================

class PlayerSettings:
    SPEED: int = 100            # px/s
    INITIAL_RELOAD: int = 20    # steps
    RELOAD: int = 10            # steps
    MAX_MISSILES: int = 3
    BOTTOM_MARGIN: int = 15


class MissileSettings:
    SPEED: int = 100            # px/s


class AlienSettings:
    MOVE_THRESHOLD: int = 10    # px of accumulated drift before a move commits
    COLUMN_GAP: int = 10        # px added to sprite width for the column pitch
    FIRE_CHANCE: float = 0.1
    ANIMATION_FRAMES: int = 2


class FlockSettings:
    INITIAL_SPEED: int = 10
    INITIAL_DX: int = 10


class ShieldSettings:
    SPRITES = ("shield1", "shield2", "shield3")
    X_OFFSETS = (-70, -10, 50)  # relative to the surface centre
    BOTTOM_MARGIN: int = 50


# ===========================================================
# Audio & Levels
# ===========================================================

class AudioSettings:
    CHANNELS: int = 10


class Levels:
    FIRST: int = 1
