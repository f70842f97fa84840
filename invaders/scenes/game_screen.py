"""
game_screen.py
--------------
Title/menu screen used for start, game over and win states.

Menu dispatch on fire:
    Play (0) -> proceed callback (start or restart the game)
    Help (2) -> HelpScreen whose back action restores this same screen
"""

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.services.config_manager import load_config
from invaders.scenes.base_scene import BaseScene
from invaders.scenes.help_screen import HelpScreen
from invaders.scenes.menu import Menu


DEFAULT_SCREEN_CONFIG = {
    "menu": {"items": ["Play", "Settings", "Help", "Credits"], "y": 200, "size": 40},
    "titles": {
        "start": {"title": "Space Invaders", "subtitle": "Press space to start"},
        "game_over": {"title": "Game Over", "subtitle": "(Press space to restart)"},
        "win": {"title": "You Win!", "subtitle": "(Press space to restart)"},
    },
    "help": {
        "title": "Help - Controls",
        "lines": ["Left Arrow: Move Left", "Right Arrow: Move Right", "Space: Fire"],
        "footer": "(Press space to return)",
    },
}

PLAY_INDEX = 0
HELP_INDEX = 2


def screen_config() -> dict:
    return load_config("screens.yaml", DEFAULT_SCREEN_CONFIG)


class GameScreen(BaseScene):

    def __init__(self, game, title, subtitle="", callback=None, config=None):
        super().__init__(game)
        self.config = config or screen_config()
        self.title = title
        self.subtitle = subtitle
        self.callback = callback

        menu = self.config["menu"]
        self.menu = Menu(title, menu["items"], menu["y"], menu["size"], game.width, game.height)

    def input(self, dt, keys):
        if (keys["up"] or keys["down"]) and self.callback:
            self.menu.input(dt, keys)

    def step(self, dt, keys):
        if not keys["fire"]:
            return

        index = self.menu.selected_index
        if index == PLAY_INDEX and self.callback:
            DebugLogger.action(f"'{self.title}': {self.menu.selected_item}", category="scene")
            self.callback()
        elif index == HELP_INDEX:
            self.game.load_board(self._help_screen())

    def _help_screen(self) -> HelpScreen:
        game = self.game
        help_config = self.config["help"]
        return HelpScreen(
            game,
            help_config["title"],
            help_config["lines"],
            on_back=lambda: game.load_board(self),
            footer=help_config["footer"],
        )

    def render(self, surface):
        self._clear(surface)
        self.menu.render(surface)

        if self.subtitle:
            surface.set_text_align("center")
            surface.set_font(16)
            surface.set_fill_style("white")
            surface.fill_text(self.subtitle, self.game.width / 2, self.game.height - 40)


# ===========================================================
# Screen Factories
# ===========================================================

def _titled_screen(game, key, callback):
    config = screen_config()
    titles = config["titles"][key]
    return GameScreen(game, titles["title"], titles["subtitle"], callback, config=config)


def start_screen(game, on_start):
    return _titled_screen(game, "start", on_start)


def game_over_screen(game, on_restart):
    return _titled_screen(game, "game_over", on_restart)


def win_screen(game, on_restart):
    return _titled_screen(game, "win", on_restart)
