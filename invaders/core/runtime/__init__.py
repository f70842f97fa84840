"""
Runtime configuration exports.
"""

from invaders.core.runtime.game_settings import (
    Display,
    Physics,
    DebugSpeed,
    PlayerSettings,
    MissileSettings,
    AlienSettings,
    FlockSettings,
    ShieldSettings,
    AudioSettings,
    Levels,
)

__all__ = [
    'Display',
    'Physics',
    'DebugSpeed',
    'PlayerSettings',
    'MissileSettings',
    'AlienSettings',
    'FlockSettings',
    'ShieldSettings',
    'AudioSettings',
    'Levels',
]
