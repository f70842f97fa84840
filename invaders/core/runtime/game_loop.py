"""
game_loop.py
------------
Frame driver and game context.

Responsibilities
----------------
- Turn frame timestamps into clamped delta times
- Dispatch input -> step -> render to the active board or screen
- Own board swaps: screens and host callbacks call load_board(), level
  clear calls advance_level() (the only place a next-level Board is built)
- Pause/resume/stop, plus the +/- simulation speed control
"""

from dataclasses import dataclass
from typing import Callable

import pygame

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import DebugSpeed, Display, Physics
from invaders.core.services.input_manager import InputState
from invaders.systems.board import Board


def _noop():
    pass


@dataclass
class GameCallbacks:
    """Host-supplied transition hooks."""
    start: Callable[[], None] = _noop
    die: Callable[[], None] = _noop
    win: Callable[[], None] = _noop


class GameLoop:
    """
    Runs the active board once per frame.

    The loop doubles as the context boards and entities read: surface size,
    sprite atlas, audio, level data and host callbacks.
    """

    def __init__(self, width, height, atlas, audio, level_data,
                 callbacks=None, surface=None, input_manager=None, display=None):
        self.width = width
        self.height = height
        self.atlas = atlas
        self.audio = audio
        self.level_data = level_data
        self.callbacks = callbacks or GameCallbacks()

        self.surface = surface
        self.input_manager = input_manager
        self.display = display

        self.board = None
        self.keys = InputState()
        self.speed = DebugSpeed.DEFAULT

        self.running = False
        self._paused = False
        self._focus_paused = False
        self._last_frame_time = None

        DebugLogger.init_entry("GameLoop")

    # ===========================================================
    # Board Management
    # ===========================================================

    def load_board(self, board):
        self.board = board
        DebugLogger.state(f"Active board -> {type(board).__name__}", category="scene")

    def start_level(self, level: int) -> Board:
        board = Board(self, level)
        self.load_board(board)
        return board

    def advance_level(self, level: int) -> Board:
        DebugLogger.action(f"Advancing to level {level}", category="level")
        return self.start_level(level)

    # ===========================================================
    # Timing Control
    # ===========================================================

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def time_scale(self) -> float:
        return self.speed / DebugSpeed.DEFAULT

    def start(self):
        self.running = True
        self._paused = False
        self._focus_paused = False
        self._last_frame_time = None

    def pause(self):
        if self._paused:
            return
        self._paused = True
        DebugLogger.state("Paused", category="system")

    def resume(self):
        if not self._paused:
            return
        self._paused = False
        # First frame after resume must not see the paused interval
        self._last_frame_time = None
        DebugLogger.state("Resumed", category="system")

    def stop(self):
        self.running = False
        self._paused = True

    def speed_up(self):
        if self.speed < DebugSpeed.MAX:
            self.speed = min(self.speed + DebugSpeed.STEP, DebugSpeed.MAX)
            DebugLogger.state(f"Speed: {self.speed}", category="timing")

    def speed_down(self):
        if self.speed > DebugSpeed.MIN:
            self.speed = max(self.speed - DebugSpeed.STEP, DebugSpeed.MIN)
            DebugLogger.state(f"Speed: {self.speed}", category="timing")

    # ===========================================================
    # Frame
    # ===========================================================

    def tick(self, timestamp: float):
        """
        Run one frame.

        Args:
            timestamp: Frame time in milliseconds (monotonic)
        """
        if self._paused:
            return

        if self._last_frame_time is None:
            dt = 0.0
        else:
            dt = (timestamp - self._last_frame_time) / 1000.0
        self._last_frame_time = timestamp

        dt *= self.time_scale
        if dt > Physics.MAX_FRAME_TIME:
            DebugLogger.trace(f"Clamped frame time {dt:.3f}s", category="timing")
            dt = Physics.MAX_FRAME_TIME

        # Re-read self.board each call: a swap takes effect immediately
        if self.board is not None:
            keys = self.keys
            self.board.input(dt, keys)
            self.board.step(dt, keys)
            if self.surface is not None:
                self.board.render(self.surface)

        if self.surface is not None:
            self._display_speed(self.surface)

    def _display_speed(self, surface):
        surface.set_font(DebugSpeed.FONT_SIZE, bold=True)
        surface.set_fill_style(DebugSpeed.COLOR)
        surface.set_text_align("left")
        surface.fill_text(f"Speed: {float(self.speed):.1f}", self.width / 2 + 150, self.height / 2 - 230)

    # ===========================================================
    # Runtime Loop
    # ===========================================================

    def run(self):
        """Clock-driven loop until the window closes. Requires display and input."""
        if self.display is None or self.input_manager is None:
            raise RuntimeError("GameLoop.run() needs a display and an input manager")

        DebugLogger.section("Game Loop")
        clock = pygame.time.Clock()
        self.start()

        while self.running:
            clock.tick(Display.FPS)
            self._handle_events()
            if not self.running:
                break

            self.keys = self.input_manager.state()
            self.tick(pygame.time.get_ticks())
            self.display.present()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                DebugLogger.action("Quit signal received")
                self.stop()
                return

            if event.type == pygame.WINDOWFOCUSLOST:
                self.input_manager.release_all()
                # A manual pause stays in force across focus changes
                if not self._paused:
                    self._focus_paused = True
                    self.pause()
            elif event.type == pygame.WINDOWFOCUSGAINED:
                if self._focus_paused:
                    self._focus_paused = False
                    self.resume()
            else:
                action = self.input_manager.handle_event(event)
                if action == "speedup":
                    self.speed_up()
                elif action == "speeddown":
                    self.speed_down()
                elif action == "pause":
                    self._focus_paused = False
                    if self._paused:
                        self.resume()
                    else:
                        self.pause()
