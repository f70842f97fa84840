"""
Screen exports.

Screens satisfy the Board frame contract (input/step/render) without
simulating entities.
"""

from invaders.scenes.base_scene import BaseScene
from invaders.scenes.menu import Menu
from invaders.scenes.help_screen import HelpScreen
from invaders.scenes.game_screen import (
    GameScreen,
    start_screen,
    game_over_screen,
    win_screen,
)

__all__ = [
    'BaseScene',
    'Menu',
    'HelpScreen',
    'GameScreen',
    'start_screen',
    'game_over_screen',
    'win_screen',
]
