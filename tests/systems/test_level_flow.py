"""
test_level_flow.py
------------------
Full-board scenarios: clearing a single-alien level, then either winning
or advancing to the next level through the GameLoop.
"""

import pytest

from invaders.core.services.input_manager import InputState
from invaders.entities.entity_types import EntityKind
from invaders.systems.board import Board
from tests.conftest import entities_of


KEYS = InputState()


def shoot_the_only_alien(game):
    board = game.start_level(1)
    alien = entities_of(board, EntityKind.ALIEN)[0]

    board.add_sprite("missile", alien.x, alien.y, dy=-100, player=True)
    board.missiles += 1
    board.step(0, KEYS)
    return board


@pytest.mark.integration
class TestSingleAlienLevel:

    def test_layout_has_six_entities(self, game):
        board = game.start_level(1)
        assert len(board.objects) == 6

    def test_missile_kill_speeds_up_flock(self, game):
        board = shoot_the_only_alien(game)

        flock = entities_of(board, EntityKind.ALIEN_FLOCK)[0]
        assert entities_of(board, EntityKind.ALIEN) == []
        assert entities_of(board, EntityKind.MISSILE) == []
        assert flock.speed == 11
        assert board.missiles == 0

    def test_last_level_cleared_wins(self, game, callbacks):
        board = shoot_the_only_alien(game)
        callbacks.win.assert_not_called()

        board.step(0, KEYS)

        callbacks.win.assert_called_once()
        assert game.board is board

    def test_clear_advances_to_next_level(self, make_game, callbacks):
        game = make_game({1: [[1]], 2: [[2, 2]]})
        board = shoot_the_only_alien(game)

        board.step(0, KEYS)

        assert isinstance(game.board, Board)
        assert game.board is not board
        assert game.board.level == 2
        assert [a.name for a in entities_of(game.board, EntityKind.ALIEN)] == ["alien2", "alien2"]
        callbacks.win.assert_not_called()

    def test_loop_renders_new_board_after_clear(self, make_game, surface):
        game = make_game({1: [[1]], 2: [[1]]}, surface=surface)
        board = shoot_the_only_alien(game)

        game.start()
        game.tick(0)

        assert game.board is not board
        # Only the new board drew: player, three shields and one alien
        assert surface.draw_image.call_count == 5
