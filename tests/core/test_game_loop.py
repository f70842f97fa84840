"""
test_game_loop.py
-----------------
Frame timing (clamp, pause/resume baseline, speed scaling), dispatch
order, board swaps and event handling.
"""

import pygame
import pytest
from unittest.mock import MagicMock, call, patch

from invaders.core.runtime.game_loop import GameLoop


@pytest.fixture
def board():
    return MagicMock(name="board")


@pytest.fixture
def loop(game, board):
    game.load_board(board)
    game.start()
    return game


def last_dt(board):
    return board.step.call_args.args[0]


# ===========================================================
# Timing
# ===========================================================


class TestFrameTiming:

    def test_first_frame_has_zero_dt(self, loop, board):
        loop.tick(12345)
        assert last_dt(board) == 0

    def test_dt_is_seconds_between_frames(self, loop, board):
        loop.tick(1000)
        loop.tick(1016)
        assert last_dt(board) == pytest.approx(0.016)

    def test_long_frame_is_clamped(self, loop, board):
        loop.tick(0)
        loop.tick(5000)
        assert last_dt(board) == pytest.approx(0.1)

    def test_paused_tick_does_nothing(self, loop, board):
        loop.tick(0)
        loop.pause()
        loop.tick(16)
        assert board.step.call_count == 1
        assert loop.paused

    def test_resume_resets_baseline(self, loop, board):
        loop.tick(0)
        loop.pause()
        loop.resume()
        loop.tick(60000)
        assert last_dt(board) == 0

        loop.tick(60020)
        assert last_dt(board) == pytest.approx(0.02)

    def test_stop_halts_frames(self, loop, board):
        loop.stop()
        loop.tick(0)
        assert not loop.running
        board.step.assert_not_called()


class TestSpeedControl:

    def test_default_speed_is_unscaled(self, loop):
        assert loop.speed == 30
        assert loop.time_scale == 1

    def test_speed_up_scales_dt(self, loop, board):
        loop.speed_up()
        loop.tick(0)
        loop.tick(30)
        assert loop.speed == 40
        assert last_dt(board) == pytest.approx(0.04)

    def test_speed_is_bounded(self, loop):
        for _ in range(20):
            loop.speed_up()
        assert loop.speed == 100
        for _ in range(20):
            loop.speed_down()
        assert loop.speed == 0

    def test_zero_speed_freezes_simulation(self, loop, board):
        loop.speed = 0
        loop.tick(0)
        loop.tick(50)
        assert last_dt(board) == 0

    def test_speed_readout(self, game, board, surface):
        game.surface = surface
        game.load_board(board)
        game.start()

        game.tick(0)

        surface.set_font.assert_called_with(16, bold=True)
        surface.fill_text.assert_called_with("Speed: 30.0", 400, 20)


# ===========================================================
# Dispatch
# ===========================================================


class TestDispatch:

    def test_input_step_render_order(self, game, board, surface):
        game.surface = surface
        game.load_board(board)
        game.start()

        game.tick(0)

        assert board.method_calls == [
            call.input(0.0, game.keys),
            call.step(0.0, game.keys),
            call.render(surface),
        ]

    def test_swap_during_step_renders_new_board(self, game, surface):
        old, new = MagicMock(name="old"), MagicMock(name="new")
        old.step.side_effect = lambda dt, keys: game.load_board(new)
        game.surface = surface
        game.load_board(old)
        game.start()

        game.tick(0)

        old.render.assert_not_called()
        new.render.assert_called_once_with(surface)
        new.step.assert_not_called()

    def test_no_surface_skips_render(self, loop, board):
        loop.tick(0)
        board.render.assert_not_called()

    def test_start_level_builds_board(self, game):
        board = game.start_level(1)
        assert game.board is board
        assert board.level == 1


# ===========================================================
# Runtime Loop
# ===========================================================


class TestRunLoop:

    def test_run_requires_display_and_input(self, game):
        with pytest.raises(RuntimeError):
            game.run()

    def make_runnable(self, game):
        game.display = MagicMock(name="display")
        game.input_manager = MagicMock(name="input_manager")
        game.input_manager.handle_event.return_value = None
        return game

    def test_quit_event_stops(self, game):
        self.make_runnable(game)
        with patch("invaders.core.runtime.game_loop.pygame.event.get",
                   return_value=[pygame.event.Event(pygame.QUIT)]):
            game._handle_events()
        assert not game.running

    def test_focus_loss_pauses_and_releases_keys(self, game):
        self.make_runnable(game)
        game.start()
        with patch("invaders.core.runtime.game_loop.pygame.event.get",
                   return_value=[pygame.event.Event(pygame.WINDOWFOCUSLOST)]):
            game._handle_events()
        assert game.paused
        game.input_manager.release_all.assert_called_once()

        with patch("invaders.core.runtime.game_loop.pygame.event.get",
                   return_value=[pygame.event.Event(pygame.WINDOWFOCUSGAINED)]):
            game._handle_events()
        assert not game.paused

    def test_manual_pause_survives_focus_round_trip(self, game):
        self.make_runnable(game)
        game.start()
        game.input_manager.handle_event.return_value = "pause"
        events = [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p),
            pygame.event.Event(pygame.WINDOWFOCUSLOST),
            pygame.event.Event(pygame.WINDOWFOCUSGAINED),
        ]
        with patch("invaders.core.runtime.game_loop.pygame.event.get", return_value=events):
            game._handle_events()

        assert game.paused

    def test_unpause_key_after_focus_loss(self, game):
        self.make_runnable(game)
        game.start()
        game.input_manager.handle_event.return_value = "pause"
        events = [
            pygame.event.Event(pygame.WINDOWFOCUSLOST),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p),
            pygame.event.Event(pygame.WINDOWFOCUSGAINED),
        ]
        with patch("invaders.core.runtime.game_loop.pygame.event.get", return_value=events):
            game._handle_events()

        assert not game.paused

    @pytest.mark.parametrize("action, expected", [("speedup", 40), ("speeddown", 20)])
    def test_speed_actions(self, game, action, expected):
        self.make_runnable(game)
        game.input_manager.handle_event.return_value = action
        with patch("invaders.core.runtime.game_loop.pygame.event.get",
                   return_value=[pygame.event.Event(pygame.KEYDOWN, key=0)]):
            game._handle_events()
        assert game.speed == expected

    def test_pause_action_toggles(self, game):
        self.make_runnable(game)
        game.start()
        game.input_manager.handle_event.return_value = "pause"
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p)
        with patch("invaders.core.runtime.game_loop.pygame.event.get", return_value=[event]):
            game._handle_events()
            assert game.paused
            game._handle_events()
            assert not game.paused

    def test_run_exits_on_quit(self, game):
        self.make_runnable(game)
        with patch("invaders.core.runtime.game_loop.pygame") as mock_pygame:
            mock_pygame.QUIT = pygame.QUIT
            mock_pygame.event.get.return_value = [MagicMock(type=pygame.QUIT)]
            game.run()
            mock_pygame.quit.assert_called_once()
        game.display.present.assert_not_called()


def test_constructor_defaults(atlas):
    loop = GameLoop(500, 500, atlas, MagicMock(), {1: [[1]]})
    assert loop.board is None
    assert not loop.running
    loop.callbacks.win()
