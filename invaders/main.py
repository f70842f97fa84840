"""
main.py
-------
Host bootstrap: window, asset loading, screen wiring and the game loop.

Screen flow
-----------
start screen --Play--> level 1 --player hit--> game over --Play--> level 1
                          |
                          +--last level cleared--> win screen --Play--> level 1
"""

import pygame

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.errors import InvadersError
from invaders.core.runtime.game_loop import GameCallbacks, GameLoop
from invaders.core.runtime.game_settings import Display, Levels
from invaders.core.services.asset_loader import load_assets
from invaders.core.services.display_manager import DisplayManager
from invaders.core.services.input_manager import InputManager
from invaders.audio.sound_manager import SoundManager
from invaders.graphics.canvas import Canvas
from invaders.graphics.sprite_atlas import SpriteAtlas
from invaders.scenes.game_screen import game_over_screen, start_screen, win_screen
from invaders.systems.level_data import load_levels


def _draw_message(canvas, lines):
    canvas.clear_rect(0, 0, canvas.width, canvas.height)
    canvas.set_text_align("center")
    canvas.set_fill_style("white")

    y = canvas.height / 2
    for size, text in lines:
        canvas.set_font(size)
        canvas.fill_text(text, canvas.width / 2, y)
        y += size + 10


def _wait_for_quit():
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
        clock.tick(Display.FPS)


def build_game(canvas, display, atlas, audio, level_data, input_manager):
    """Create the GameLoop and wire the screen transitions into it."""
    game = GameLoop(
        Display.WIDTH,
        Display.HEIGHT,
        atlas,
        audio,
        level_data,
        surface=canvas,
        input_manager=input_manager,
        display=display,
    )

    def start_game():
        game.start_level(Levels.FIRST)

    game.callbacks = GameCallbacks(
        start=start_game,
        die=lambda: game.load_board(game_over_screen(game, start_game)),
        win=lambda: game.load_board(win_screen(game, start_game)),
    )
    game.load_board(start_screen(game, start_game))
    return game


def main() -> int:
    """Entry point. Returns a process exit code."""
    DebugLogger.section("Initializing Space Invaders")

    pygame.init()
    DebugLogger.init_entry("Pygame")

    display = DisplayManager(Display.WIDTH, Display.HEIGHT, Display.CAPTION)
    canvas = Canvas(display.get_surface(), display.background)

    _draw_message(canvas, [(24, "Loading...")])
    display.present()

    atlas = SpriteAtlas()
    audio = SoundManager()
    try:
        level_data = load_levels()
        load_assets(atlas, audio)
    except (InvadersError, ValueError) as e:
        DebugLogger.fail(f"Failed to load game: {e}", category="loading")
        _draw_message(canvas, [(24, "Failed to load game"), (14, str(e))])
        display.present()
        _wait_for_quit()
        pygame.quit()
        return 1

    game = build_game(canvas, display, atlas, audio, level_data, InputManager())
    game.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
